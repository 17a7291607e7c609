"""Upstream channel shapes and the normalized channel record.

Upstream models mirror what the innertube client hands back.  Every field is
optional and validated with ``from_attributes=True`` so client objects and
plain dicts are accepted alike.  A field that fails validation is dropped to
``None`` on its own, leaving the rest of the block intact.  Defaulting happens
in the normalizer.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

logger = structlog.get_logger()


class Thumbnail(BaseModel):
    """An image descriptor (avatar, banner or thumbnail)."""

    model_config = {"from_attributes": True}

    url: str = ""
    width: int = 0
    height: int = 0


class UpstreamModel(BaseModel):
    """Base for upstream shapes; invalid fields become ``None``."""

    model_config = {"from_attributes": True}

    @field_validator("*", mode="wrap")
    @classmethod
    def drop_invalid_field(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            logger.debug(
                "upstream_field_dropped",
                model=cls.__name__,
                field=info.field_name,
                errors=exc.error_count(),
            )
            return None


class JoinedDate(UpstreamModel):
    """Human-readable join date, e.g. ``"Joined May 10, 2025"``."""

    text: str | None = None


class ChannelMetadata(UpstreamModel):
    """Static metadata exposed directly on a channel handle."""

    external_id: str | None = None
    title: str | None = None
    url: str | None = None
    vanity_channel_url: str | None = None
    is_family_safe: bool | None = None
    keywords: list[str] | None = None
    avatar: list[Thumbnail] | Thumbnail | None = None
    thumbnail: list[Thumbnail] | Thumbnail | None = None
    tags: list[str] | None = None
    is_unlisted: bool | None = None


class AboutMetadata(UpstreamModel):
    """Metadata block of the asynchronously fetched "about" page.

    Counts arrive as display strings such as ``"1,234"`` or ``"9.91M"``.
    """

    description: str | None = None
    subscriber_count: str | int | float | None = None
    view_count: str | int | float | None = None
    joined_date: JoinedDate | None = None
    video_count: str | int | float | None = None
    country: str | None = None


class RawChannelHandle(Protocol):
    """Channel object returned by the upstream client."""

    metadata: Any

    async def get_about(self) -> Any:
        """Fetch the about page; the result carries an optional ``metadata``."""
        ...


class NormalizedChannel(BaseModel):
    """Canonical, fully-defaulted channel record.

    Immutable.  Serialize with ``model_dump(by_alias=True)`` to get the
    camelCase response contract (``vanityUrl``, ``subscriberCount`` ...).
    """

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    id: str = Field(default="", description="External channel ID (UC...)")
    title: str = Field(default="", description="Channel title")
    description: str = Field(default="", description="About-page description")
    url: str = Field(default="", description="Canonical channel URL")
    vanity_url: str = Field(default="", description="Vanity (@handle) URL")
    is_family_safe: bool = False
    keywords: list[str] = Field(default_factory=list)
    avatars: list[Thumbnail] | Thumbnail = Field(default_factory=Thumbnail)
    thumbnails: list[Thumbnail] | Thumbnail = Field(default_factory=Thumbnail)
    tags: list[str] = Field(default_factory=list)
    is_unlisted: bool = False
    subscriber_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    joined_date: str = Field(default="", description="Join date as displayed upstream")
    video_count: int = Field(default=0, ge=0)
    country: str = Field(default="", description="Country as displayed upstream")
