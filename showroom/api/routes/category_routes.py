# showroom/api/routes/category_routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, current_app

from showroom.extensions import content_client
from showroom.models import Category
from showroom.services.catalog import category_path, path_collisions
from showroom.services.content_client import ContentFetchError

api_categories = Blueprint("api_categories", __name__, url_prefix="/api/categories")


def _cat_to_dict(c: Category, collisions: dict) -> dict:
    path = category_path(c.name)
    return {
        "id": c.id,
        "name": c.name,
        "icon": c.icon,
        "description": c.description,
        "path": path,
        # two names sharing one URL path; reported, not renamed
        "path_collision": path in collisions,
        "benefits": [{"title": b.title, "description": b.description} for b in c.benefits],
    }


@api_categories.get("/")
def list_categories():
    try:
        categories = content_client().get_categories()
    except ContentFetchError as e:
        current_app.logger.error("content fetch failed: %s", e)
        return jsonify({"error": "Content service unavailable", "resource": e.resource}), 502

    collisions = path_collisions(categories)
    for path, names in collisions.items():
        current_app.logger.warning("Category path collision '%s': %s", path, names)
    return jsonify([_cat_to_dict(c, collisions) for c in categories]), 200
