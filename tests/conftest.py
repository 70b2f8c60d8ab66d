"""Shared fixtures for deadshows tests."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterator

import httpx
import pytest

from deadshows.config import Settings
from deadshows.logging import configure_logging
from deadshows.models import Recording
from deadshows.sources.archive import ArchiveClient


def _recording(
    identifier: str,
    date: str = "1977-05-08",
    title: str | None = None,
    **fields: Any,
) -> Recording:
    return Recording(
        identifier=identifier,
        title=title or identifier,
        date=date,
        url=f"https://archive.org/details/{identifier}",
        **fields,
    )


@pytest.fixture()
def make_recording() -> Callable[..., Recording]:
    return _recording


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def archive_client(settings: Settings) -> Iterator[Callable[..., ArchiveClient]]:
    """Build an ArchiveClient whose requests are answered by *handler*."""
    clients: list[ArchiveClient] = []

    def build(
        handler: Callable[[httpx.Request], httpx.Response],
        today: date = date(2024, 5, 8),
    ) -> ArchiveClient:
        client = ArchiveClient(
            settings=settings,
            transport=httpx.MockTransport(handler),
            today=lambda: today,
        )
        clients.append(client)
        return client

    yield build

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    configure_logging(level="WARNING")
