"""Normalizers for upstream innertube objects."""

from .channel import ChannelNormalizer, fetch_about, parse_channel_info
from .counts import parse_count

__all__ = [
    "ChannelNormalizer",
    "fetch_about",
    "parse_channel_info",
    "parse_count",
]
