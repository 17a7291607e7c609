"""Build the outbound proxy URL from configuration.

Every failure mode (proxy disabled, unreadable or invalid configuration,
missing host/port) collapses to ``None``.  Nothing here raises to callers.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

import structlog

from .config import ProxyConfig

logger = structlog.get_logger()

PROXY_ACTIVE = "active"

ConfigLoader = Callable[[], ProxyConfig]


def load_proxy_config(loader: ConfigLoader = ProxyConfig) -> ProxyConfig | None:
    """Read proxy configuration, returning ``None`` if the loader fails."""
    try:
        return loader()
    except Exception:
        logger.warning("proxy_config_unreadable", exc_info=True)
        return None


def build_proxy_url(config: ProxyConfig) -> str | None:
    """Return ``http://[user:pass@]host:port`` or ``None`` when disabled.

    Username and password are percent-encoded independently and only used
    when both are non-empty.
    """
    if config.status != PROXY_ACTIVE:
        logger.debug("proxy_inactive")
        return None

    host = config.host
    port = config.port
    if not host or not port:
        logger.warning("proxy_incomplete", has_host=bool(host), has_port=bool(port))
        return None

    auth = ""
    if config.username and config.password:
        # safe="": everything but the unreserved set (letters, digits, -._~)
        # is escaped, so !'()* are percent-encoded too.
        auth = f"{quote(config.username, safe='')}:{quote(config.password, safe='')}@"

    url = f"http://{auth}{host}:{port}"
    logger.info("proxy_url_built", host=host, port=port, has_auth=bool(auth))
    return url


def build_proxy_url_from_config(loader: ConfigLoader = ProxyConfig) -> str | None:
    """Load proxy configuration via *loader* and build the proxy URL."""
    config = load_proxy_config(loader)
    if config is None:
        return None
    try:
        return build_proxy_url(config)
    except Exception:
        logger.warning("proxy_config_unusable", exc_info=True)
        return None
