# showroom/api/routes/product_routes.py
from flask import Blueprint, jsonify, request, current_app

from showroom.extensions import content_client
from showroom.models import Product
from showroom.services.catalog import ALL, filter_products, find_category_by_name, find_product
from showroom.services.content_client import ContentFetchError
from showroom.services.media import card_preview, normalize_media

api_products = Blueprint("api_products", __name__, url_prefix="/api/products")


# ========================= Helpers =========================

def _product_dict(product: Product, upload_base: str) -> dict:
    preview = card_preview(product, upload_base)
    return {
        "id": product.id,
        "title": product.title,
        "description": product.description,
        "category_id": product.category_id,
        "category_name": product.category_name,
        "image_url": preview.src,
        "placeholder": preview.placeholder,
        "media": [m.to_dict() for m in normalize_media(product, upload_base)],
        "specifications": product.specifications,
    }


def _upstream_error(e: ContentFetchError):
    current_app.logger.error("content fetch failed: %s", e)
    return jsonify({"error": "Content service unavailable", "resource": e.resource}), 502


def _load_products():
    data = content_client().fetch_many(["products", "categories"])
    return data["products"], data["categories"]


# ========================= Endpoints =========================

@api_products.get("/")
def get_products():
    try:
        products, categories = _load_products()
    except ContentFetchError as e:
        return _upstream_error(e)

    active = (request.args.get("category") or ALL).strip()
    if active != ALL and not find_category_by_name(categories, active):
        return jsonify({"error": "Category not found"}), 404

    upload_base = current_app.config["UPLOAD_BASE_URL"]
    items = filter_products(products, active, categories)
    return jsonify([_product_dict(p, upload_base) for p in items]), 200


@api_products.get("/<string:product_ref>")
def get_product(product_ref: str):
    try:
        products, _ = _load_products()
    except ContentFetchError as e:
        return _upstream_error(e)

    p = find_product(products, product_ref)
    if p is None:
        return jsonify({"error": "Product not found"}), 404
    return jsonify(_product_dict(p, current_app.config["UPLOAD_BASE_URL"])), 200


@api_products.get("/<string:product_ref>/media")
def get_product_media(product_ref: str):
    try:
        products, _ = _load_products()
    except ContentFetchError as e:
        return _upstream_error(e)

    p = find_product(products, product_ref)
    if p is None:
        return jsonify({"error": "Product not found"}), 404
    media = normalize_media(p, current_app.config["UPLOAD_BASE_URL"])
    return jsonify([m.to_dict() for m in media]), 200
