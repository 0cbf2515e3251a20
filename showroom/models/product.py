# showroom/models/product.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from showroom.models._coerce import as_list, clean_str, coerce_id
from showroom.models.category import Category


@dataclass
class Feature:
    image: str | None = None
    alt: str | None = None


@dataclass
class Product:
    id: int | str | None
    title: str
    description: str | None = None
    category_id: int | str | None = None
    category_name: str | None = None
    image: str | None = None
    image_alt: str | None = None
    features: list[Feature] = field(default_factory=list)
    videos: list[str] = field(default_factory=list)
    specifications: str | None = None
    features_text: str | None = None

    @classmethod
    def from_api(cls, raw: dict, categories: Iterable[Category] = ()) -> "Product":
        """
        Ingest one product record from the content API.

        Media fields keep their raw string values (the normalizer decides what
        is displayable) but anything that is not a string is dropped here, and
        `videos` always ends up as a list. The category reference is resolved
        to the category id whether the record carries `category_id`, a nested
        `category` object, or only a category name.
        """
        categories = list(categories)

        features: list[Feature] = []
        features_text = None
        raw_features = raw.get("features")
        if isinstance(raw_features, list):
            for f in raw_features:
                if not isinstance(f, dict):
                    continue
                img = f.get("image")
                features.append(
                    Feature(
                        image=img if isinstance(img, str) else None,
                        alt=clean_str(f.get("alt")),
                    )
                )
        elif isinstance(raw_features, str):
            features_text = raw_features

        videos = [v for v in as_list(raw.get("videos")) if isinstance(v, str)]

        image = raw.get("image")
        specs = raw.get("specifications")

        category_id, category_name = _resolve_category(raw, categories)

        return cls(
            id=coerce_id(raw.get("id")),
            title=clean_str(raw.get("title")) or clean_str(raw.get("name")) or "",
            description=clean_str(raw.get("description")),
            category_id=category_id,
            category_name=category_name,
            image=image if isinstance(image, str) else None,
            image_alt=clean_str(raw.get("image_alt")),
            features=features,
            videos=videos,
            specifications=specs if isinstance(specs, str) else None,
            features_text=features_text,
        )

    def __repr__(self) -> str:
        return f"<Product {self.title}>"


def _resolve_category(raw: dict, categories: list[Category]):
    nested = raw.get("category")
    nested_id = None
    nested_name = None
    if isinstance(nested, dict):
        nested_id = coerce_id(nested.get("id"))
        nested_name = clean_str(nested.get("name"))
    elif isinstance(nested, str):
        nested_name = clean_str(nested)

    cat_id = coerce_id(raw.get("category_id"))
    if cat_id is None:
        cat_id = nested_id

    by_id = {c.id: c for c in categories if c.id is not None}
    if cat_id is None and nested_name:
        match = next((c for c in categories if c.name == nested_name), None)
        if match is not None:
            cat_id = match.id

    name = nested_name
    if cat_id in by_id:
        name = by_id[cat_id].name
    return cat_id, name
