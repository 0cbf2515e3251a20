# showroom/services/media.py
from __future__ import annotations

from dataclasses import dataclass

from showroom.models import MediaItem, Product
from showroom.models.media import IMAGE, VIDEO

# Placeholder kinds shown instead of a product card image
PLACEHOLDER_VIDEO = "video"      # "Click to view video"
PLACEHOLDER_GALLERY = "gallery"  # "View Gallery"
PLACEHOLDER_NONE = "none"        # "No media available"


def _valid(path) -> str | None:
    if not isinstance(path, str):
        return None
    s = path.strip()
    return s or None


def media_url(upload_base: str, path: str) -> str:
    return f"{upload_base.rstrip('/')}/{path.lstrip('/')}"


def normalize_media(product: Product, upload_base: str) -> list[MediaItem]:
    """
    Build the ordered gallery for a product.

    Main image first, then feature images in feature order, then videos in
    declaration order. Only non-empty (after trimming) strings make it in.
    Nothing is de-duplicated: a path used twice shows up twice.
    """
    title = product.title or None
    media: list[MediaItem] = []

    main = _valid(product.image)
    if main:
        media.append(MediaItem(
            IMAGE,
            media_url(upload_base, main),
            product.image_alt or title or "Main product image",
        ))

    for feature in product.features:
        path = _valid(feature.image)
        if path:
            media.append(MediaItem(
                IMAGE,
                media_url(upload_base, path),
                feature.alt or (f"{title} feature" if title else "Product feature"),
            ))

    for video in product.videos:
        path = _valid(video)
        if path:
            media.append(MediaItem(
                VIDEO,
                media_url(upload_base, path),
                f"{title or 'Product'} video",
            ))

    return media


@dataclass(frozen=True)
class CardPreview:
    """What a product card shows in its image slot."""
    src: str | None
    alt: str
    placeholder: str | None  # set when there is no image to show
    fallback: str            # placeholder to swap in if the image fails to load


def card_preview(product: Product, upload_base: str) -> CardPreview:
    # Priority: main image, video placeholder, first feature image, nothing
    main = _valid(product.image)
    has_video = any(_valid(v) for v in product.videos)
    feature = next((f for f in product.features if _valid(f.image)), None)

    if has_video:
        fallback = PLACEHOLDER_VIDEO
    elif feature is not None:
        fallback = PLACEHOLDER_GALLERY
    else:
        fallback = PLACEHOLDER_NONE

    if main:
        return CardPreview(
            media_url(upload_base, main),
            product.image_alt or product.title,
            None,
            fallback,
        )
    if has_video:
        return CardPreview(None, product.title, PLACEHOLDER_VIDEO, PLACEHOLDER_VIDEO)
    if feature is not None:
        return CardPreview(
            media_url(upload_base, _valid(feature.image)),
            feature.alt or product.title,
            None,
            PLACEHOLDER_NONE,
        )
    return CardPreview(None, product.title, PLACEHOLDER_NONE, PLACEHOLDER_NONE)
