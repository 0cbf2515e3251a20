# tests/test_catalog.py
import logging

from showroom.models import Category, Product
from showroom.services.catalog import (
    ALL,
    build_products_view,
    category_path,
    collection_text,
    filter_products,
    find_category_by_path,
    find_product,
    path_collisions,
    resolve_active_filter,
    split_lines,
    toggle_faq,
)

UPLOADS = "http://u"


def _catalog():
    categories = [
        Category.from_api({"id": 1, "name": "Security Doors"}),
        Category.from_api({"id": 2, "name": "Windows"}),
    ]
    raw = [
        {"id": 1, "title": "A", "category_id": 1},
        {"id": 2, "title": "B", "category": {"name": "Windows"}},
        {"id": 3, "title": "C", "category_id": "1"},
        {"id": 4, "title": "D", "category": {"id": 2, "name": "Windows"}},
        {"id": 5, "title": "E"},
    ]
    return [Product.from_api(r, categories) for r in raw], categories


def test_all_returns_everything_unchanged():
    products, categories = _catalog()
    assert filter_products(products, ALL, categories) == products


def test_filter_by_name_keeps_order():
    products, categories = _catalog()
    assert [p.title for p in filter_products(products, "Security Doors", categories)] == ["A", "C"]
    assert [p.title for p in filter_products(products, "Windows", categories)] == ["B", "D"]


def test_filter_unknown_category_is_empty():
    products, categories = _catalog()
    assert filter_products(products, "Gates", categories) == []


def test_name_only_reference_resolves_to_id():
    products, _ = _catalog()
    b = next(p for p in products if p.title == "B")
    assert b.category_id == 2
    assert b.category_name == "Windows"


def test_category_path():
    assert category_path("Security Doors") == "security-doors"
    assert category_path("UPVC  Sliding\tWindows") == "upvc-sliding-windows"


def test_path_collisions_are_reported_not_fixed(caplog):
    categories = [
        Category.from_api({"id": 1, "name": "Safety Doors"}),
        Category.from_api({"id": 2, "name": "safety  doors"}),
        Category.from_api({"id": 3, "name": "Windows"}),
    ]
    assert path_collisions(categories) == {"safety-doors": ["Safety Doors", "safety  doors"]}

    with caplog.at_level(logging.WARNING):
        match = find_category_by_path(categories, "safety-doors")
    assert match.id == 1
    assert "safety-doors" in caplog.text


def test_resolve_active_filter():
    _, categories = _catalog()
    assert resolve_active_filter(None, categories) == ALL
    assert resolve_active_filter("windows", categories) == "Windows"
    assert resolve_active_filter("nope", categories) is None


def test_find_product_by_id_or_title():
    products, _ = _catalog()
    assert find_product(products, "3").title == "C"
    assert find_product(products, "D").id == 4
    assert find_product(products, "") is None
    assert find_product(products, "99") is None


def test_collection_text():
    cat = Category.from_api({
        "id": 1,
        "name": "Security Doors",
        "product_descriptor": "Doors",
        "collection_text_template": "{count} {descriptor} in our {category} range",
    })
    assert collection_text(cat, 4) == "4 doors in our security doors range"

    plain = Category.from_api({"id": 2, "name": "Windows"})
    assert collection_text(plain, 0) == "Browse our windows collection"

    no_descriptor = Category.from_api({
        "id": 3, "name": "Gates", "collection_text_template": "{count} {descriptor}",
    })
    assert collection_text(no_descriptor, 2) == "2 products"


def test_split_lines():
    assert split_lines("a\n\n  b  \n") == ["a", "b"]
    assert split_lines(None) == []


def test_toggle_faq():
    assert toggle_faq(None, 1) == 1
    assert toggle_faq(1, 1) is None
    assert toggle_faq(0, 1) == 1


def test_build_view_for_category_path():
    products, categories = _catalog()
    view = build_products_view(products, categories, UPLOADS, path="windows")
    assert view.active_filter == "Windows"
    assert [p.title for p in view.filtered] == ["B", "D"]
    assert view.header_title == "Windows"
    assert view.selected is None


def test_build_view_unknown_path():
    products, categories = _catalog()
    assert build_products_view(products, categories, UPLOADS, path="gates") is None


def test_build_view_with_filter_arg_and_selection():
    products, categories = _catalog()
    view = build_products_view(
        products, categories, UPLOADS,
        filter_arg="Security Doors", product_ref="1", media_arg="5", faq_arg="1",
    )
    assert view.active_filter == "Security Doors"
    assert view.selected.title == "A"
    assert view.gallery.state == "empty"
    assert view.active_faq == 1
    assert view.faq_link_target(1) is None


def test_build_view_ignores_unknown_filter_arg():
    products, categories = _catalog()
    view = build_products_view(products, categories, UPLOADS, filter_arg="Gates")
    assert view.active_filter == ALL
    assert view.header_title == "Premium Door Solutions"
