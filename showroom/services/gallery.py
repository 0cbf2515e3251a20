# showroom/services/gallery.py
from __future__ import annotations

from typing import Sequence

from showroom.models import MediaItem

STATE_EMPTY = "empty"
STATE_IMAGE = "image"
STATE_VIDEO = "video"


class Gallery:
    """Carousel over a product's normalized media with a wrapping cursor."""

    def __init__(self, items: Sequence[MediaItem] = (), cursor: int = 0):
        self.items: list[MediaItem] = list(items)
        self.cursor = 0
        if self.items:
            self.select(cursor)

    @classmethod
    def from_request_arg(cls, items: Sequence[MediaItem], raw) -> "Gallery":
        # ?media= comes from our own links; anything else falls back to the first item
        try:
            idx = int(raw)
        except (TypeError, ValueError):
            idx = 0
        if not 0 <= idx < len(items):
            idx = 0
        return cls(items, idx)

    def open(self, items: Sequence[MediaItem]) -> None:
        self.items = list(items)
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_navigation(self) -> bool:
        return len(self.items) > 1

    @property
    def next_index(self) -> int:
        if not self.has_navigation:
            return self.cursor
        return (self.cursor + 1) % len(self.items)

    @property
    def prev_index(self) -> int:
        if not self.has_navigation:
            return self.cursor
        return (self.cursor - 1) % len(self.items)

    def advance(self) -> int:
        self.cursor = self.next_index
        return self.cursor

    def retreat(self) -> int:
        self.cursor = self.prev_index
        return self.cursor

    def select(self, index: int) -> int:
        self.cursor = index
        return self.cursor

    @property
    def current(self) -> MediaItem | None:
        if not self.items:
            return None
        return self.items[self.cursor]

    @property
    def state(self) -> str:
        item = self.current
        if item is None:
            return STATE_EMPTY
        return STATE_VIDEO if item.is_video else STATE_IMAGE
