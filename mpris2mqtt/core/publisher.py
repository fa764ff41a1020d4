"""Publishing now-playing facts to the MQTT broker."""

import logging
from typing import Callable, List, Optional

import aiomqtt

from ..errors import HostResolutionError, PublishError
from ..models.fact import PublishedFact, Topic
from ..models.snapshot import MetadataSnapshot
from ..utils.platform import get_hostname

PLACEHOLDER = "N/A"

# At most once: a lost update is superseded by the next change
QOS_AT_MOST_ONCE = 0


def build_facts(
    snapshot: MetadataSnapshot,
    source_host: Optional[str] = None
) -> List[PublishedFact]:
    """Map a snapshot to the facts to publish, in send order.

    Args:
        snapshot: Track snapshot
        source_host: Local host name, or None to leave out the source topic

    Returns:
        List of PublishedFact objects
    """
    facts = [
        PublishedFact(Topic.TITLE, _or_placeholder(snapshot.title)),
        PublishedFact(Topic.ARTIST, _or_placeholder(snapshot.artist_line)),
        PublishedFact(Topic.ALBUM, _or_placeholder(snapshot.album)),
    ]

    if source_host is not None:
        facts.append(PublishedFact(Topic.SOURCE, source_host))

    return facts


def _or_placeholder(value: Optional[str]) -> str:
    return PLACEHOLDER if value is None else value


class MetadataPublisher:
    """Publishes track snapshots as retained messages."""

    def __init__(
        self,
        client: aiomqtt.Client,
        logger: logging.Logger,
        resolve_hostname: Callable[[], str] = get_hostname
    ):
        """Initialize publisher.

        Args:
            client: Connected aiomqtt client
            logger: Logger instance
            resolve_hostname: Callable returning the local host name
        """
        self.client = client
        self.logger = logger
        self.resolve_hostname = resolve_hostname

    async def send(self, fact: PublishedFact) -> None:
        """Publish a single fact.

        Raises:
            PublishError: If the broker connection rejects the send
        """
        try:
            await self.client.publish(
                fact.topic.value,
                fact.value,
                qos=QOS_AT_MOST_ONCE,
                retain=True,
            )
        except aiomqtt.MqttError as e:
            raise PublishError(
                f"Failed to publish {fact.topic.value}: {e}",
                topic=fact.topic.value
            ) from e

        self.logger.debug(f"Published {fact.topic.value}: {fact.value!r}")

    async def publish_placeholder(self) -> PublishedFact:
        """Publish the placeholder title so subscribers see a defined value."""
        fact = PublishedFact(Topic.TITLE, PLACEHOLDER)
        await self.send(fact)
        return fact

    def _source_host(self) -> Optional[str]:
        try:
            return self.resolve_hostname()
        except HostResolutionError as e:
            self.logger.warning(f"Skipping {Topic.SOURCE.value}: {e}")
            return None

    async def publish(self, snapshot: MetadataSnapshot) -> List[PublishedFact]:
        """Publish all facts of a snapshot.

        Title, artist and album are always sent; the source topic is
        skipped when the host name cannot be resolved.

        Args:
            snapshot: Track snapshot to publish

        Returns:
            Facts that were published, in send order

        Raises:
            PublishError: If any send fails; later facts are not sent
        """
        facts = build_facts(snapshot, self._source_host())

        for fact in facts:
            await self.send(fact)

        return facts
