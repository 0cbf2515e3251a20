# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the test modules:
# - a stand-in requests.Session that serves canned content-API payloads
# - a Flask app wired to a ContentClient built on such sessions
# =============================================================================

import copy
import json
import os

os.environ.setdefault("CONTENT_API_BASE", "http://content.test/api")
os.environ.setdefault("UPLOAD_BASE_URL", "http://content.test/uploads")

import pytest
import requests

from showroom.app import create_app
from showroom.config import TestConfig
from showroom.services.content_client import ContentClient

API = "http://content.test/api"
UPLOADS = "http://content.test/uploads"


CATEGORIES = {
    "data": [
        {
            "id": 1,
            "name": "Security Doors",
            "icon": "🛡",
            "description": "Steel doors built to last",
            "product_descriptor": "Doors",
            "collection_text_template": "Showing {count} {descriptor} in {category}",
            "benefits": [
                {"title": "Tough steel", "description": "2mm cold-rolled sheet"},
                {"title": "Multi-point locks"},
            ],
        },
        {"id": 2, "name": "Windows", "icon": "🪟"},
    ]
}

PRODUCTS = {
    "data": [
        {
            "id": 10,
            "title": "Fortress Door",
            "description": "Our strongest door",
            "category_id": 1,
            "image": "a.jpg",
            "features": [{"image": "b.jpg"}, {"image": ""}],
            "videos": "v.mp4",
            "specifications": "Steel frame\n\n  Powder coated  ",
        },
        {
            "id": 11,
            "title": "Slide Window",
            "category": {"name": "Windows"},
            "image": "",
            "features": [],
            "videos": [],
        },
        {
            "id": 12,
            "title": "Grill Door",
            "category_id": "1",
            "image": "  ",
            "features": [{"image": "g1.jpg", "alt": "Grill close-up"}],
            "videos": ["", "  "],
        },
    ]
}

STATS = [
    {"id": 1, "icon": "Calender", "value": 15, "suffix": "+", "label": "Years"},
    {"id": 2, "icon": "Rocket", "value": "5000", "suffix": "+", "label": "Homes"},
]

TESTIMONIALS = {
    "data": [
        {"name": "Asha", "quote": "Great doors", "location": "Nashik", "rating": 4},
    ]
}

FAQS = {
    "data": [
        {"question": "Do you install?", "answer": "Yes, everywhere in Nashik."},
        {"question": "Warranty?", "answer": "5-10 years."},
    ]
}

CONTACT = {
    "corporate_address_line1": "Plot 7, MIDC",
    "corporate_address_line2": "Satpur",
    "corporate_address_line3": "",
    "email": "hello@example.com",
    "tel_number": "0253-123456",
    "mobile_number": "9000000000",
    "social_link_1": "https://facebook.com/example",
    "outlet_name": "Satpur Outlet",
}


def _payloads():
    return {
        f"{API}/productcategories": CATEGORIES,
        f"{API}/products": PRODUCTS,
        f"{API}/stats": STATS,
        f"{API}/customertestimonials": TESTIMONIALS,
        f"{API}/faqs": FAQS,
        f"{API}/contact": CONTACT,
    }


class FakeSession(requests.Session):
    """
    Serves payloads by URL. A payload may also be an int (HTTP status to
    answer with), an exception instance (raised), or bytes (raw body).
    Sessions made for the same client share `calls`.
    """

    def __init__(self, payloads, calls):
        super().__init__()
        self.payloads = payloads
        self.calls = calls

    def get(self, url, **kwargs):
        self.calls.append(url)
        payload = self.payloads.get(url, 404)
        if isinstance(payload, Exception):
            raise payload

        r = requests.Response()
        r.url = url
        if isinstance(payload, int):
            r.status_code = payload
            r._content = b"{}"
        elif isinstance(payload, bytes):
            r.status_code = 200
            r._content = payload
        else:
            r.status_code = 200
            r._content = json.dumps(payload).encode("utf-8")
        return r


@pytest.fixture
def payloads():
    return copy.deepcopy(_payloads())


@pytest.fixture
def calls():
    return []


@pytest.fixture
def content(payloads, calls):
    return ContentClient(
        API, timeout=1, max_workers=3,
        session_factory=lambda: FakeSession(payloads, calls),
    )


@pytest.fixture
def app(content):
    return create_app(TestConfig, content=content)


@pytest.fixture
def client(app):
    return app.test_client()
