# showroom/models/media.py
from __future__ import annotations

from dataclasses import dataclass

IMAGE = "image"
VIDEO = "video"


@dataclass(frozen=True)
class MediaItem:
    kind: str  # "image" | "video"
    src: str
    alt: str

    @property
    def is_video(self) -> bool:
        return self.kind == VIDEO

    def to_dict(self) -> dict:
        return {"type": self.kind, "src": self.src, "alt": self.alt}

    def __repr__(self) -> str:
        return f"<MediaItem {self.kind} - {self.src}>"
