"""Legacy docs URL redirect middleware.

Pure ASGI middleware. The path-resolution callable is injected at
construction time so ``core`` never imports from ``services``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


def normalize_request_path(path: str, strip_trailing_slash: bool = True) -> str:
    """Normalize an incoming path the way the redirect table's keys are written."""
    if strip_trailing_slash and len(path) > 1:
        return path.rstrip("/") or "/"
    return path


def build_redirect_url(target: str, query: str) -> str:
    """Append ``query`` to ``target``, keeping any ``#fragment`` last."""
    if not query:
        return target
    path, sep, fragment = target.partition("#")
    joiner = "&" if "?" in path else "?"
    return f"{path}{joiner}{query}{sep}{fragment}"


class LegacyRedirectMiddleware:
    """Redirect legacy docs URLs to their current location.

    Registered as the outermost middleware so redirects are served before
    anything else in the stack does work for a request that will
    immediately redirect.

    Args:
        app: The next ASGI application in the middleware stack.
        resolver: A callable ``(path: str) -> str | None`` that returns
            the redirect target or ``None`` if no redirect is needed.
        status_code: HTTP status for redirects (301, 302, 307 or 308).
        preserve_query_string: Carry the request's query string over.
        strip_trailing_slash: Look up ``/x/`` as ``/x``.
        cache_control: ``Cache-Control`` value for redirects, or None.
    """

    def __init__(
        self,
        app: ASGIApp,
        resolver: Callable[[str], str | None] | None = None,
        status_code: int = 308,
        preserve_query_string: bool = True,
        strip_trailing_slash: bool = True,
        cache_control: str | None = None,
    ) -> None:
        self.app = app
        self._resolve = resolver or (lambda path: None)
        self.status_code = status_code
        self.preserve_query_string = preserve_query_string
        self.strip_trailing_slash = strip_trailing_slash
        self.cache_control = cache_control

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path: str = scope["path"]
        lookup_path = normalize_request_path(path, self.strip_trailing_slash)
        try:
            target_path = self._resolve(lookup_path)
        except Exception:
            logger.exception("legacy_url.resolve_error", extra={"path": path})
            target_path = None

        if target_path is not None and target_path != path:
            query = ""
            if self.preserve_query_string:
                query = scope.get("query_string", b"").decode("latin-1")
            target_url = build_redirect_url(target_path, query)
            logger.info(
                "legacy_url.redirect",
                extra={
                    "from_path": path,
                    "to_path": target_path,
                    "has_query": bool(query),
                    "query_length": len(query),
                    "status_code": self.status_code,
                },
            )
            headers = {"cache-control": self.cache_control} if self.cache_control else None
            response = RedirectResponse(
                url=target_url, status_code=self.status_code, headers=headers
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
