"""Background consumer for inbound broker events."""

import logging

import aiomqtt


async def drain_events(client: aiomqtt.Client, logger: logging.Logger) -> None:
    """Consume inbound messages so the client never stalls on them.

    Messages are only logged. Returns when the connection goes away;
    the poll loop notices the broken connection on its next publish.

    Args:
        client: Connected aiomqtt client
        logger: Logger instance
    """
    try:
        async for message in client.messages:
            logger.debug(f"Received = {message.topic}: {message.payload!r}")
    except aiomqtt.MqttError as e:
        logger.warning(f"Broker event stream closed: {e}")
