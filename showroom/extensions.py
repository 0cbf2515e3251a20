# showroom/extensions.py
from __future__ import annotations

from flask import current_app
from flask_cors import CORS

from showroom.services.content_client import ContentClient

# Keep extension instances in one place to avoid circular imports
cors = CORS()


def _clean_base_url(url: str | None) -> str:
    """Return the URL without surrounding spaces or trailing slashes."""
    return (url or "").strip().rstrip("/")


def init_content_client(app, client: ContentClient | None = None) -> ContentClient:
    """
    Attach the content service client to the app, with a bit of config
    sanitization so a stray slash or a bad timeout doesn't break every page.
    """
    cfg = app.config

    # 1) base URLs
    base = _clean_base_url(cfg.get("CONTENT_API_BASE"))
    if not base:
        base = "https://ishanib.demovoting.com/api"
        app.logger.warning("CONTENT_API_BASE was not set -> using fallback '%s'.", base)
    cfg["CONTENT_API_BASE"] = base
    cfg["UPLOAD_BASE_URL"] = _clean_base_url(cfg.get("UPLOAD_BASE_URL")) or base.rsplit("/api", 1)[0] + "/uploads"

    # 2) timeout / pool size
    try:
        timeout = int(cfg.get("CONTENT_API_TIMEOUT"))
        if timeout <= 0:
            raise ValueError
    except (TypeError, ValueError):
        timeout = 10
        cfg["CONTENT_API_TIMEOUT"] = timeout
        app.logger.info("CONTENT_API_TIMEOUT was invalid -> setting %s.", timeout)

    try:
        workers = max(1, int(cfg.get("CONTENT_API_WORKERS")))
    except (TypeError, ValueError):
        workers = 5
    cfg["CONTENT_API_WORKERS"] = workers

    if client is None:
        client = ContentClient(base, timeout=timeout, max_workers=workers)
    app.extensions["content_client"] = client

    app.logger.info(
        "CONTENT cfg -> api=%s uploads=%s timeout=%s workers=%s",
        cfg.get("CONTENT_API_BASE"),
        cfg.get("UPLOAD_BASE_URL"),
        timeout,
        workers,
    )
    return client


def content_client() -> ContentClient:
    return current_app.extensions["content_client"]
