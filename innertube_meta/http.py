"""Outbound HTTP client factory with optional proxy routing."""

from __future__ import annotations

import httpx
import structlog

from .config import ProxyConfig
from .proxy import ConfigLoader, build_proxy_url_from_config

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 8.0


def resolve_proxy_url(
    *,
    use_proxy: bool,
    proxy_url: str | None = None,
    loader: ConfigLoader = ProxyConfig,
) -> str | None:
    """Pick the proxy for a client: explicit override first, then config."""
    if not use_proxy:
        return None

    resolved = proxy_url or build_proxy_url_from_config(loader)
    if resolved is None:
        logger.warning("proxy_requested_but_unresolved")
    else:
        logger.debug("proxy_resolved", proxy_url=resolved)
    return resolved


def create_http_client(
    *,
    use_proxy: bool = False,
    proxy_url: str | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    loader: ConfigLoader = ProxyConfig,
) -> httpx.AsyncClient:
    """Create an :class:`httpx.AsyncClient`, routed via the proxy if one resolves.

    Proxy environment variables (``HTTP_PROXY`` ...) are ignored; the
    service configuration is the only proxy source.  The caller owns the
    client and must close it (``aclose()`` or ``async with``).
    """
    proxy = resolve_proxy_url(use_proxy=use_proxy, proxy_url=proxy_url, loader=loader)
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        proxy=proxy,
        trust_env=False,
    )
    logger.debug("http_client_created", proxied=proxy is not None, timeout=timeout_seconds)
    return client
