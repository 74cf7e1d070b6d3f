"""Serve a built Storybook from disk through browser request interception.

No HTTP server runs during extraction. Instead :class:`StaticAssetResolver`
is installed as a Playwright route handler on the browser context and
answers every request (documents, scripts, styles, fonts, images) with the
matching file under ``dist_path``. Requests that escape the site root or do
not map to a file receive a 404; read failures receive a 500.

Example
-------
>>> from pathlib import Path
>>> resolver = StaticAssetResolver(Path("storybook-static"))  # doctest: +SKIP
>>> resolver.resolve("/iframe.html").status  # doctest: +SKIP
200
"""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ
from pathlib import Path
from urllib.parse import unquote, urlsplit

from ._constants import INDEX_DOCUMENT

if typ.TYPE_CHECKING:
    from playwright.sync_api import Route

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".map": "application/json",
    ".txt": "text/plain",
    ".xml": "application/xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".eot": "application/vnd.ms-fontobject",
}
CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@dc.dataclass(frozen=True, slots=True)
class AssetResponse:
    """Response payload handed to ``route.fulfill``."""

    status: int
    body: bytes
    content_type: str = "text/plain"
    headers: dict[str, str] = dc.field(default_factory=dict)


NOT_FOUND = AssetResponse(status=404, body=b"File not found")
SERVER_ERROR = AssetResponse(status=500, body=b"Internal server error")


def content_type_for(path: str | Path) -> str:
    """Return the content type for ``path`` based on its extension."""
    return CONTENT_TYPES.get(posixpath.splitext(str(path))[1].lower(), DEFAULT_CONTENT_TYPE)


class StaticAssetResolver:
    """Map request paths onto files below a site root."""

    def __init__(self, dist_path: Path) -> None:
        self.root = dist_path.resolve()

    def locate(self, request_path: str) -> Path | None:
        """Return the file serving ``request_path``, or ``None`` when unavailable.

        Extension-less paths are treated as directories and resolved to their
        ``index.html``. Paths resolving outside the root are rejected.
        """
        relative = unquote(request_path).lstrip("/")
        if not posixpath.splitext(relative)[1]:
            relative = posixpath.join(relative, INDEX_DOCUMENT)
        candidate = (self.root / relative).resolve()
        if not candidate.is_relative_to(self.root) or not candidate.is_file():
            return None
        return candidate

    def resolve(self, request_path: str) -> AssetResponse:
        """Return the response for ``request_path``.

        Parameters
        ----------
        request_path : str
            URL path of the request, for example ``/iframe.html`` or
            ``/assets/index.js``.

        Returns
        -------
        AssetResponse
            200 with the file bytes, 404 when the file is missing or outside
            the root, or 500 when reading fails.
        """
        target = self.locate(request_path)
        if target is None:
            logger.debug("No asset for %s", request_path)
            return NOT_FOUND
        try:
            body = target.read_bytes()
        except OSError:
            logger.exception("Error serving file %s", target)
            return SERVER_ERROR
        return AssetResponse(
            status=200,
            body=body,
            content_type=content_type_for(target),
            headers=dict(CORS_HEADERS),
        )

    def handle(self, route: Route) -> None:
        """Fulfil an intercepted Playwright request from disk."""
        response = self.resolve(urlsplit(route.request.url).path)
        route.fulfill(
            status=response.status,
            body=response.body,
            content_type=response.content_type,
            headers=response.headers or None,
        )


__all__ = [
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "AssetResponse",
    "StaticAssetResolver",
    "content_type_for",
]
