# showroom/models/category.py
from __future__ import annotations

from dataclasses import dataclass, field

from showroom.models._coerce import clean_str, coerce_id


@dataclass
class Benefit:
    title: str
    description: str | None = None


@dataclass
class Category:
    id: int | str | None
    name: str
    icon: str | None = None
    description: str | None = None
    product_descriptor: str | None = None
    collection_text_template: str | None = None
    homepage_text: str | None = None
    benefits: list[Benefit] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict) -> "Category":
        benefits = []
        for b in raw.get("benefits") or []:
            if isinstance(b, dict) and clean_str(b.get("title")):
                benefits.append(Benefit(clean_str(b.get("title")), clean_str(b.get("description"))))
            elif isinstance(b, str) and b.strip():
                benefits.append(Benefit(b.strip()))

        return cls(
            id=coerce_id(raw.get("id")),
            name=clean_str(raw.get("name")) or "",
            icon=raw.get("icon"),
            description=clean_str(raw.get("description")),
            product_descriptor=clean_str(raw.get("product_descriptor")),
            collection_text_template=clean_str(raw.get("collection_text_template")),
            homepage_text=clean_str(raw.get("homepage_text")),
            benefits=benefits,
        )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
