"""innertube-meta: normalize innertube channel objects and build proxy URLs."""

from .config import AppConfig, ProxyConfig
from .http import create_http_client, resolve_proxy_url
from .logging import setup_logging
from .models import NormalizedChannel
from .normalizers import ChannelNormalizer, parse_channel_info, parse_count
from .proxy import build_proxy_url, build_proxy_url_from_config, load_proxy_config

__all__ = [
    "AppConfig",
    "ChannelNormalizer",
    "NormalizedChannel",
    "ProxyConfig",
    "build_proxy_url",
    "build_proxy_url_from_config",
    "create_http_client",
    "load_proxy_config",
    "parse_channel_info",
    "parse_count",
    "resolve_proxy_url",
    "setup_logging",
]
