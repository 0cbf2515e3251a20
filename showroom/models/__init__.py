# showroom/models/__init__.py
from .media import MediaItem
from .category import Category, Benefit
from .product import Product, Feature
from .content import Stat, Testimonial, Faq, ContactInfo

__all__ = [
    "MediaItem",
    "Category",
    "Benefit",
    "Product",
    "Feature",
    "Stat",
    "Testimonial",
    "Faq",
    "ContactInfo",
]
