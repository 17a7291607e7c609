"""Channel normalizer: turns an upstream channel handle into a NormalizedChannel."""

from __future__ import annotations

import asyncio
from typing import Any

import structlog
from pydantic import ValidationError

from ..models import (
    AboutMetadata,
    ChannelMetadata,
    NormalizedChannel,
    RawChannelHandle,
    Thumbnail,
)
from .counts import parse_count

logger = structlog.get_logger()


def _field(obj: Any, name: str) -> Any:
    """Read *name* from a mapping or an attribute-bearing object."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


async def fetch_about(handle: RawChannelHandle) -> AboutMetadata | None:
    """Await the handle's about page and return its metadata block.

    Returns ``None`` when the fetch raises, is cancelled, or comes back
    without a usable ``metadata`` block.
    """
    try:
        about = await handle.get_about()
    except asyncio.CancelledError:
        logger.warning("channel_about_cancelled")
        return None
    except Exception:
        logger.warning("channel_about_failed", exc_info=True)
        return None

    raw = _field(about, "metadata")
    if raw is None:
        logger.debug("channel_about_missing_metadata")
        return None

    try:
        return AboutMetadata.model_validate(raw)
    except ValidationError as exc:
        logger.warning("channel_about_invalid", errors=exc.error_count())
        return None


class ChannelNormalizer:
    """Normalize upstream channel handles into the canonical channel record."""

    async def normalize(self, handle: RawChannelHandle) -> NormalizedChannel:
        meta = self._read_metadata(handle)
        about = await fetch_about(handle)
        if about is None:
            about = AboutMetadata()

        joined_date = about.joined_date.text if about.joined_date else None

        channel = NormalizedChannel(
            id=meta.external_id or "",
            title=meta.title or "",
            description=about.description or "",
            url=meta.url or "",
            vanity_url=meta.vanity_channel_url or "",
            is_family_safe=bool(meta.is_family_safe),
            keywords=list(meta.keywords or []),
            avatars=meta.avatar if meta.avatar is not None else Thumbnail(),
            thumbnails=meta.thumbnail if meta.thumbnail is not None else Thumbnail(),
            tags=list(meta.tags or []),
            is_unlisted=bool(meta.is_unlisted),
            subscriber_count=parse_count(about.subscriber_count),
            view_count=parse_count(about.view_count),
            joined_date=joined_date or "",
            video_count=parse_count(about.video_count),
            country=about.country or "",
        )
        logger.debug("channel_normalized", channel_id=channel.id)
        return channel

    # ------------------------------------------------------------------
    # Static metadata
    # ------------------------------------------------------------------

    @staticmethod
    def _read_metadata(handle: RawChannelHandle) -> ChannelMetadata:
        raw = _field(handle, "metadata")
        if raw is None:
            return ChannelMetadata()
        try:
            return ChannelMetadata.model_validate(raw)
        except ValidationError as exc:
            logger.warning("channel_metadata_invalid", errors=exc.error_count())
            return ChannelMetadata()


_default_normalizer = ChannelNormalizer()


async def parse_channel_info(handle: RawChannelHandle) -> NormalizedChannel:
    """Normalize *handle* with the shared :class:`ChannelNormalizer`."""
    return await _default_normalizer.normalize(handle)
