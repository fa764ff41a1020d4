"""Test fixtures for mpris2mqtt tests."""

import asyncio
import logging
from typing import Iterable, List, Union
from unittest.mock import AsyncMock, MagicMock

import pytest

from mpris2mqtt.models.snapshot import MetadataSnapshot


class FakeSource:
    """Player source returning scripted snapshots or raising scripted errors.

    The last entry repeats once the script is exhausted.
    """

    def __init__(self, results: Iterable[Union[MetadataSnapshot, Exception]]):
        self.results: List[Union[MetadataSnapshot, Exception]] = list(results)
        self.calls = 0

    def get_snapshot(self) -> MetadataSnapshot:
        result = self.results[min(self.calls, len(self.results) - 1)]
        self.calls += 1
        if isinstance(result, Exception):
            raise result
        return result


class IdleMessages:
    """Stand-in for aiomqtt's message iterator that never yields."""

    def __aiter__(self):
        return self

    async def __anext__(self):
        await asyncio.Event().wait()
        raise StopAsyncIteration


@pytest.fixture
def logger() -> logging.Logger:
    """Logger shared by components under test."""
    return logging.getLogger("mpris2mqtt.test")


@pytest.fixture
def mqtt_client() -> MagicMock:
    """Mock aiomqtt client recording publishes."""
    client = MagicMock()
    client.publish = AsyncMock()
    client.messages = IdleMessages()
    return client


@pytest.fixture
def song_a() -> MetadataSnapshot:
    """Snapshot of a typical track."""
    return MetadataSnapshot(title="Song A", artists=("Artist X",), album="Album 1")


@pytest.fixture
def published(mqtt_client: MagicMock):
    """Return the topic/payload pairs sent through the mock client, in order."""

    def _published() -> List[tuple]:
        return [c.args[:2] for c in mqtt_client.publish.await_args_list]

    return _published
