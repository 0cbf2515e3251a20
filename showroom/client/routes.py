# showroom/client/routes.py
from __future__ import annotations

from flask import Blueprint, abort, current_app, render_template, request, url_for

from showroom.extensions import content_client
from showroom.models import ContactInfo
from showroom.services.catalog import build_products_view, split_lines, category_path
from showroom.services.content_client import ContentFetchError
from showroom.services.media import card_preview

client_bp = Blueprint("client_bp", __name__)

GENERIC_ERROR = "Failed to fetch data"

# --- Helpers ----------------------------------------------------------------


@client_bp.app_template_global()
def page_url(**overrides) -> str:
    """Current page URL with some query args replaced (None drops the arg)."""
    args = request.args.to_dict()
    for key, val in overrides.items():
        if val is None:
            args.pop(key, None)
        else:
            args[key] = val
    args.update(request.view_args or {})
    return url_for(request.endpoint, **args)


@client_bp.app_template_filter("category_path")
def _category_path_filter(name: str) -> str:
    return category_path(name)


@client_bp.app_template_filter("lines")
def _lines_filter(text) -> list[str]:
    return split_lines(text)


@client_bp.app_context_processor
def _site_context():
    upload_base = current_app.config["UPLOAD_BASE_URL"]
    return {
        "site_name": current_app.config["SITE_NAME"],
        "card_preview": lambda product: card_preview(product, upload_base),
        "fallbacks": {
            "mobile": current_app.config["FALLBACK_MOBILE"],
            "whatsapp": current_app.config["FALLBACK_WHATSAPP"],
            "outlet_name": current_app.config["FALLBACK_OUTLET_NAME"],
            "open_hours": current_app.config["FALLBACK_OPEN_HOURS"],
        },
    }


def _error_page(resource: str, contact: ContactInfo | None = None):
    current_app.logger.error("page %s: content fetch failed for '%s'", request.path, resource)
    return render_template(
        "error.html",
        message=GENERIC_ERROR,
        contact=contact or ContactInfo.empty(),
    ), 502


def _fetch_sections(names: list[str]) -> dict:
    """
    Fetch everything a page needs, each resource on its own: a failed one
    comes back as None so the sections that did load still render.
    """
    return content_client().fetch_many(names, optional=names)


# --- Pages ------------------------------------------------------------------

@client_bp.get("/")
def home():
    data = _fetch_sections(["products", "categories", "stats", "contact"])

    view = None
    products_error = None
    if data["products"] is None or data["categories"] is None:
        products_error = GENERIC_ERROR
        current_app.logger.error("home: product section unavailable")
    else:
        view = build_products_view(
            data["products"],
            data["categories"],
            current_app.config["UPLOAD_BASE_URL"],
            filter_arg=request.args.get("filter"),
            product_ref=request.args.get("product"),
            media_arg=request.args.get("media"),
        )
    return render_template(
        "home.html",
        view=view,
        products_error=products_error,
        stats=data["stats"] or [],
        contact=data["contact"] or ContactInfo.empty(),
    )


@client_bp.get("/products")
@client_bp.get("/products/<string:category>")
def products_page(category: str | None = None):
    data = _fetch_sections(["products", "categories", "testimonials", "faqs", "contact"])
    contact = data["contact"] or ContactInfo.empty()

    for name in ("products", "categories", "testimonials", "faqs"):
        if data[name] is None:
            return _error_page(name, contact)

    view = build_products_view(
        data["products"],
        data["categories"],
        current_app.config["UPLOAD_BASE_URL"],
        path=category,
        filter_arg=request.args.get("filter"),
        product_ref=request.args.get("product"),
        media_arg=request.args.get("media"),
        faq_arg=request.args.get("faq"),
    )
    if view is None:
        current_app.logger.info("unknown category path '%s'", category)
        abort(404)

    return render_template(
        "products.html",
        view=view,
        testimonials=data["testimonials"],
        faqs=data["faqs"],
        contact=contact,
    )


@client_bp.get("/factory-outlet")
def factory_outlet():
    try:
        contact = content_client().get_contact()
    except ContentFetchError as e:
        return _error_page(e.resource)
    return render_template("factory_outlet.html", contact=contact)


@client_bp.get("/contactus")
def contact_us():
    try:
        contact = content_client().get_contact()
    except ContentFetchError as e:
        return _error_page(e.resource)
    subject = (request.args.get("product") or "").strip() or None
    return render_template("contact.html", contact=contact, subject=subject)
