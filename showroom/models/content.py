# showroom/models/content.py
from __future__ import annotations

from dataclasses import dataclass

from showroom.models._coerce import clean_str, coerce_id, coerce_number

# Stat icon names as stored by the CMS -> icon set names
ICON_ALIASES = {
    "Calender": "Calendar",
}
DEFAULT_STAT_ICON = "HelpCircle"
KNOWN_STAT_ICONS = {
    "Award",
    "Building",
    "Calendar",
    "CheckCircle",
    "Clock",
    "Factory",
    "Globe",
    "Home",
    "MapPin",
    "Package",
    "Shield",
    "Smile",
    "Star",
    "ThumbsUp",
    "Trophy",
    "Truck",
    "Users",
    "Wrench",
}


@dataclass
class Stat:
    id: int | str | None
    icon: str
    value: int | float
    suffix: str
    label: str
    duration: int | float = 2

    @classmethod
    def from_api(cls, raw: dict) -> "Stat":
        icon = clean_str(raw.get("icon")) or DEFAULT_STAT_ICON
        icon = ICON_ALIASES.get(icon, icon)
        if icon not in KNOWN_STAT_ICONS:
            icon = DEFAULT_STAT_ICON
        return cls(
            id=coerce_id(raw.get("id")),
            icon=icon,
            value=coerce_number(raw.get("value"), 0),
            suffix=raw.get("suffix") if isinstance(raw.get("suffix"), str) else "",
            label=clean_str(raw.get("label")) or "",
            duration=coerce_number(raw.get("duration"), 0) or 2,
        )


@dataclass
class Testimonial:
    name: str
    quote: str
    location: str | None = None
    rating: int = 0

    @classmethod
    def from_api(cls, raw: dict) -> "Testimonial":
        rating = int(coerce_number(raw.get("rating"), 0))
        return cls(
            name=clean_str(raw.get("name")) or "",
            quote=clean_str(raw.get("quote")) or "",
            location=clean_str(raw.get("location")),
            rating=max(0, min(5, rating)),
        )

    @property
    def stars(self) -> list[bool]:
        return [i < self.rating for i in range(5)]


@dataclass
class Faq:
    question: str
    answer: str

    @classmethod
    def from_api(cls, raw: dict) -> "Faq":
        return cls(
            question=clean_str(raw.get("question")) or "",
            answer=clean_str(raw.get("answer")) or "",
        )


@dataclass
class ContactInfo:
    address_lines: list[str]
    email: str = ""
    tel_number: str = ""
    mobile_number: str = ""
    social_links: tuple = ()
    whatsapp_link: str | None = None
    outlet_name: str | None = None
    open_hours: str | None = None

    @classmethod
    def from_api(cls, raw: dict | None) -> "ContactInfo":
        raw = raw if isinstance(raw, dict) else {}
        lines = [clean_str(raw.get(f"corporate_address_line{i}")) for i in range(1, 5)]
        return cls(
            address_lines=[line for line in lines if line],
            email=clean_str(raw.get("email")) or "",
            tel_number=clean_str(raw.get("tel_number")) or "",
            mobile_number=clean_str(raw.get("mobile_number")) or "",
            social_links=tuple(clean_str(raw.get(f"social_link_{i}")) or "#" for i in range(1, 5)),
            whatsapp_link=clean_str(raw.get("social_link_5")),
            outlet_name=clean_str(raw.get("outlet_name")),
            open_hours=clean_str(raw.get("open_hours")),
        )

    @classmethod
    def empty(cls) -> "ContactInfo":
        return cls.from_api(None)
