"""Publishing of text messages to an AMQP exchange."""

from __future__ import annotations

import logging

import pika
from pika.exceptions import AMQPError

logger = logging.getLogger(__name__)

VIRTUAL_HOST = "/"
FRAME_MAX = 131072
CHANNEL_NUMBER = 1
CONTENT_TYPE = "text/plain"
PERSISTENT_DELIVERY = 2
# RabbitMQ's built-in guest account.
_GUEST = "guest"


class PublisherError(Exception):
    """Raised when the broker cannot be reached or a message cannot be sent."""


class AmqpPublisher:
    """Sends messages to one exchange with one routing key."""

    def __init__(self, exchange: str, routing_key: str) -> None:
        self.exchange = exchange
        self.routing_key = routing_key
        self._connection = None
        self._channel = None

    def connect(self, hostname: str, port: int) -> None:
        """Open a connection and a channel to the broker."""
        parameters = pika.ConnectionParameters(
            host=hostname,
            port=port,
            virtual_host=VIRTUAL_HOST,
            credentials=pika.PlainCredentials(_GUEST, _GUEST),
            frame_max=FRAME_MAX,
            heartbeat=0,
        )
        try:
            connection = pika.BlockingConnection(parameters)
        except (AMQPError, OSError) as exc:
            raise PublisherError(
                f"cannot connect to AMQP broker at {hostname}:{port}: {exc}"
            ) from exc
        logger.info("TCP socket created and connected")

        try:
            channel = connection.channel(channel_number=CHANNEL_NUMBER)
        except (AMQPError, OSError) as exc:
            connection.close()
            raise PublisherError(f"failed to open AMQP channel: {exc}") from exc

        self._connection = connection
        self._channel = channel
        logger.info("AMQP channel opened successfully")

    def publish(self, message: str) -> None:
        """Publish a text message to the configured exchange."""
        if self._channel is None:
            raise PublisherError("publisher is not connected")
        properties = pika.BasicProperties(
            content_type=CONTENT_TYPE, delivery_mode=PERSISTENT_DELIVERY
        )
        try:
            self._channel.basic_publish(
                exchange=self.exchange,
                routing_key=self.routing_key,
                body=message.encode("utf-8"),
                properties=properties,
            )
        except (AMQPError, OSError) as exc:
            raise PublisherError(f"failed to publish message: {exc}") from exc
        logger.info("Message Sent to RabbitMQ: %s", message)

    def close(self) -> None:
        """Close the connection if one is open."""
        connection, self._connection, self._channel = self._connection, None, None
        if connection is not None and connection.is_open:
            connection.close()

    def __enter__(self) -> AmqpPublisher:
        return self

    def __exit__(self, *args) -> None:
        self.close()