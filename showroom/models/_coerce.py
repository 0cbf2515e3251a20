# showroom/models/_coerce.py
"""Small helpers for turning loosely-typed API values into clean Python values."""
from __future__ import annotations


def clean_str(v) -> str | None:
    """Trimmed string, or None for anything that is not a non-empty string."""
    if not isinstance(v, str):
        return None
    s = v.strip()
    return s or None


def coerce_id(v):
    # The content API sends ids both as 3 and "3"
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None


def coerce_number(v, default=0):
    if isinstance(v, bool):
        return default
    if isinstance(v, (int, float)):
        return v
    try:
        f = float(str(v).strip())
    except (TypeError, ValueError):
        return default
    return int(f) if f.is_integer() else f


def as_list(v) -> list:
    """A single value or a list of values, as a list (None -> [])."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return list(v)
    return [v]
