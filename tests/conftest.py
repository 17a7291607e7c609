"""Shared test fixtures for the innertube-meta test suite."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from innertube_meta.config import ProxyConfig

PROXY_ENV_VARS = (
    "PROXY_STATUS",
    "PROXY_HOST",
    "PROXY_PORT",
    "PROXY_USERNAME",
    "PROXY_PASSWORD",
)


@pytest.fixture(autouse=True)
def clean_proxy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def active_proxy_config() -> ProxyConfig:
    return ProxyConfig(status="active", host="127.0.0.1", port="8080")


# ------------------------------------------------------------------
# Sample channel handles (innertube client output)
# ------------------------------------------------------------------


def make_about_metadata(**overrides: Any) -> dict:
    """Build an about-page metadata block with realistic display strings."""
    data = {
        "description": "about desc",
        "subscriber_count": "1,234",
        "view_count": "9,876",
        "joined_date": {"text": "May 10, 2025"},
        "video_count": "42",
        "country": "US",
    }
    data.update(overrides)
    return data


class FakeChannel:
    """Stand-in for the innertube client's channel object."""

    def __init__(self, metadata: Any, about: Any = None, error: BaseException | None = None) -> None:
        self.metadata = metadata
        self._about = about
        self._error = error
        self.about_calls = 0

    async def get_about(self) -> Any:
        self.about_calls += 1
        if self._error is not None:
            raise self._error
        return self._about


def make_channel(
    *,
    metadata: Any = None,
    about_metadata: Any = ...,
    error: BaseException | None = None,
) -> FakeChannel:
    """Build a channel handle; attribute-style objects like the real client."""
    if metadata is None:
        metadata = SimpleNamespace(
            external_id="UC123",
            title="Chan",
            url="https://www.youtube.com/channel/UC123",
            vanity_channel_url="https://youtube.com/@chan",
            is_family_safe=True,
            keywords=["k1"],
            avatar=SimpleNamespace(url="a", width=1, height=1),
            thumbnail=SimpleNamespace(url="t", width=1, height=1),
            tags=["t1"],
            is_unlisted=False,
        )
    if about_metadata is ...:
        about_metadata = make_about_metadata()
    return FakeChannel(metadata, SimpleNamespace(metadata=about_metadata), error)
