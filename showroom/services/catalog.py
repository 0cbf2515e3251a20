# showroom/services/catalog.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from showroom.models import Category, Product
from showroom.services.gallery import Gallery
from showroom.services.media import normalize_media

logger = logging.getLogger(__name__)

ALL = "All"

DEFAULT_HEADER_TITLE = "Premium Door Solutions"
DEFAULT_HEADER_DESCRIPTION = (
    "Explore our complete range of premium doors, windows, and security solutions"
)
DEFAULT_HOMEPAGE_TEXT = "Trusted by 5000+ homeowners across India since 2010"


# ========================= Category paths =========================

def category_path(name: str) -> str:
    """URL segment for a category: lowercased, whitespace runs -> '-'."""
    return re.sub(r"\s+", "-", (name or "").lower())


def path_collisions(categories: Iterable[Category]) -> dict[str, list[str]]:
    """Paths claimed by more than one category name."""
    seen: dict[str, list[str]] = {}
    for c in categories:
        if not c.name:
            continue
        seen.setdefault(category_path(c.name), []).append(c.name)
    return {path: names for path, names in seen.items() if len(names) > 1}


def find_category_by_path(categories: Sequence[Category], path: str) -> Category | None:
    # First match wins when two names share a path; that case is only reported.
    collisions = path_collisions(categories)
    if path in collisions:
        logger.warning(
            "Category path '%s' is shared by %s; using '%s'",
            path, collisions[path], collisions[path][0],
        )
    return next((c for c in categories if c.name and category_path(c.name) == path), None)


def find_category_by_name(categories: Sequence[Category], name: str | None) -> Category | None:
    if not name:
        return None
    return next((c for c in categories if c.name == name), None)


def resolve_active_filter(path: str | None, categories: Sequence[Category]) -> str | None:
    """Category name for a URL segment; ALL without a segment; None if unknown."""
    if not path:
        return ALL
    match = find_category_by_path(categories, path)
    return match.name if match else None


# ========================= Filtering =========================

def filter_products(products: Sequence[Product], active_filter: str | None,
                    categories: Sequence[Category]) -> list[Product]:
    if not active_filter or active_filter == ALL:
        return list(products)

    ids = {c.id for c in categories if c.name == active_filter and c.id is not None}
    result = []
    for p in products:
        if p.category_id is not None:
            if p.category_id in ids:
                result.append(p)
        elif p.category_name == active_filter:
            result.append(p)
    return result


def find_product(products: Sequence[Product], ref: str | None) -> Product | None:
    """Look a product up by id, then by title (enquiry links carry the title)."""
    if not ref:
        return None
    ref = str(ref).strip()
    by_id = next((p for p in products if p.id is not None and str(p.id) == ref), None)
    if by_id is not None:
        return by_id
    return next((p for p in products if p.title == ref), None)


# ========================= Text helpers =========================

def collection_text(category: Category | None, count: int) -> str:
    if category is None:
        return ""
    if category.collection_text_template:
        return (
            category.collection_text_template
            .replace("{category}", category.name.lower())
            .replace("{count}", str(count))
            .replace("{descriptor}", (category.product_descriptor or "products").lower())
        )
    return f"Browse our {category.name.lower()} collection"


def split_lines(text: str | None) -> list[str]:
    if not isinstance(text, str):
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def toggle_faq(active: int | None, index: int) -> int | None:
    return None if active == index else index


def _to_int(raw) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


# ========================= Page state =========================

@dataclass
class ProductsView:
    """
    Everything one catalog page render needs, derived from the fetched
    content plus the request's query state. Built per request; nothing here
    outlives the response.
    """
    products: list[Product]
    categories: list[Category]
    active_filter: str = ALL
    path: str | None = None
    selected: Product | None = None
    gallery: Gallery | None = None
    active_faq: int | None = None
    category_icons: dict = field(default_factory=dict)

    @property
    def filtered(self) -> list[Product]:
        return filter_products(self.products, self.active_filter, self.categories)

    @property
    def current_category(self) -> Category | None:
        return find_category_by_name(self.categories, self.active_filter)

    @property
    def header_title(self) -> str:
        if self.path:
            cat = self.current_category
            return cat.name if cat else self.path.replace("-", " ").upper()
        return DEFAULT_HEADER_TITLE

    @property
    def header_description(self) -> str:
        cat = self.current_category
        return (cat.description if cat else None) or DEFAULT_HEADER_DESCRIPTION

    @property
    def header_subtext(self) -> str:
        cat = self.current_category
        if self.path:
            return collection_text(cat, len(self.filtered))
        return (cat.homepage_text if cat else None) or DEFAULT_HOMEPAGE_TEXT

    def faq_link_target(self, index: int) -> int | None:
        return toggle_faq(self.active_faq, index)


def build_products_view(products: Sequence[Product], categories: Sequence[Category],
                        upload_base: str, path: str | None = None,
                        filter_arg: str | None = None, product_ref: str | None = None,
                        media_arg=None, faq_arg=None) -> ProductsView | None:
    """
    Derive the page state from the request. Returns None when `path` names
    no known category.
    """
    categories = list(categories)
    active = resolve_active_filter(path, categories)
    if active is None:
        return None
    if not path and filter_arg and find_category_by_name(categories, filter_arg):
        active = filter_arg

    view = ProductsView(
        products=list(products),
        categories=categories,
        active_filter=active,
        path=path or None,
        active_faq=_to_int(faq_arg),
        category_icons={c.name: c.icon for c in categories if c.name},
    )

    selected = find_product(view.products, product_ref)
    if selected is not None:
        view.selected = selected
        view.gallery = Gallery.from_request_arg(normalize_media(selected, upload_base), media_arg)
    return view
