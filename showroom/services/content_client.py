# showroom/services/content_client.py
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional

import requests

from showroom.models import Category, ContactInfo, Faq, Product, Stat, Testimonial

logger = logging.getLogger(__name__)

# logical resource name -> path on the content service
RESOURCES = {
    "products": "products",
    "categories": "productcategories",
    "stats": "stats",
    "testimonials": "customertestimonials",
    "faqs": "faqs",
    "contact": "contact",
}


class ContentFetchError(Exception):
    """A read from the content service failed (network, HTTP status or body)."""

    def __init__(self, resource: str, message: str):
        super().__init__(f"{resource}: {message}")
        self.resource = resource
        self.message = message


def _unwrap_list(payload) -> list:
    """
    List resources come as {"data": [...]}; stats comes back as a bare list.
    Accept both, and treat a missing/invalid `data` as empty.
    """
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = payload.get("data") or []
    else:
        items = []
    if not isinstance(items, list):
        return []
    return [it for it in items if isinstance(it, dict)]


class ContentClient:
    def __init__(self, base_url: str, timeout: int = 10, max_workers: int = 5,
                 session_factory: Optional[Callable[[], requests.Session]] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_workers = max(1, int(max_workers))
        self.session_factory = session_factory or requests.Session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        # requests.Session is not thread-safe: one per thread (fetch_many workers included)
        s = getattr(self._local, "session", None)
        if s is None:
            s = self.session_factory()
            s.headers.update({"Accept": "application/json"})
            self._local.session = s
        return s

    # ========================= Transport =========================

    def _get_json(self, resource: str):
        if resource not in RESOURCES:
            raise KeyError(f"Unknown content resource: {resource}")
        url = f"{self.base_url}/{RESOURCES[resource]}"
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise ContentFetchError(resource, f"HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            raise ContentFetchError(resource, str(e) or e.__class__.__name__) from e

        try:
            return r.json()
        except ValueError as e:
            raise ContentFetchError(resource, "response is not valid JSON") from e

    # ========================= Typed accessors =========================

    def get_categories(self) -> list[Category]:
        return _to_categories(self._get_json("categories"))

    def get_products(self, categories: Iterable[Category] = ()) -> list[Product]:
        return _to_products(self._get_json("products"), categories)

    def get_stats(self) -> list[Stat]:
        return [Stat.from_api(s) for s in _unwrap_list(self._get_json("stats"))]

    def get_testimonials(self) -> list[Testimonial]:
        return [Testimonial.from_api(t) for t in _unwrap_list(self._get_json("testimonials"))]

    def get_faqs(self) -> list[Faq]:
        return [Faq.from_api(f) for f in _unwrap_list(self._get_json("faqs"))]

    def get_contact(self) -> ContactInfo:
        return ContactInfo.from_api(self._get_json("contact"))

    # ========================= Parallel fetch =========================

    def fetch_many(self, names: Iterable[str], optional: Iterable[str] = ()) -> dict:
        """
        Fetch several resources in parallel and return them converted, keyed
        by resource name.

        All requests are joined before anything is returned. The first failure
        of a required resource (in the order requested) is raised; failures of
        `optional` resources are logged and come back as None. Requesting
        products implicitly fetches categories, because product ingestion
        resolves category references against them.
        """
        names = list(dict.fromkeys(names))
        optional = set(optional)
        wanted = list(names)
        if "products" in wanted and "categories" not in wanted:
            wanted.append("categories")

        raw: dict = {}
        errors: dict = {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(wanted) or 1)) as pool:
            futures = {name: pool.submit(self._get_json, name) for name in wanted}
            for name, fut in futures.items():
                try:
                    raw[name] = fut.result()
                except ContentFetchError as e:
                    errors[name] = e

        for name in wanted:
            if name in errors:
                if name in optional:
                    logger.warning("Optional content '%s' unavailable: %s", name, errors[name])
                    continue
                raise errors[name]

        categories = _to_categories(raw["categories"]) if "categories" in raw else []
        out: dict = {}
        for name in names:
            if name not in raw:
                out[name] = None
            elif name == "categories":
                out[name] = categories
            elif name == "products":
                out[name] = _to_products(raw[name], categories)
            elif name == "contact":
                out[name] = ContactInfo.from_api(raw[name])
            elif name == "stats":
                out[name] = [Stat.from_api(s) for s in _unwrap_list(raw[name])]
            elif name == "testimonials":
                out[name] = [Testimonial.from_api(t) for t in _unwrap_list(raw[name])]
            elif name == "faqs":
                out[name] = [Faq.from_api(f) for f in _unwrap_list(raw[name])]
        return out


def _to_categories(payload) -> list[Category]:
    return [Category.from_api(c) for c in _unwrap_list(payload) if c.get("name")]


def _to_products(payload, categories: Iterable[Category]) -> list[Product]:
    categories = list(categories)
    return [Product.from_api(p, categories) for p in _unwrap_list(payload)]
