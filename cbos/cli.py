"""Command line entry point: greets the broker and runs the TCP server."""

from __future__ import annotations

import argparse
import logging
import threading
import time

from .publisher import AmqpPublisher, PublisherError
from .server import DEFAULT_BACKLOG, DEFAULT_PORT, TcpServer

logger = logging.getLogger(__name__)

GREETING = "Hello, FCC from CBOS!"
DEFAULT_AMQP_HOST = "localhost"
DEFAULT_AMQP_PORT = 5672
DEFAULT_EXCHANGE = "BOSFCC"
DEFAULT_ROUTING_KEY = "BOSDATA"
DEFAULT_DELAY = 5.0


def publish_greeting(
    hostname: str = DEFAULT_AMQP_HOST,
    port: int = DEFAULT_AMQP_PORT,
    exchange: str = DEFAULT_EXCHANGE,
    routing_key: str = DEFAULT_ROUTING_KEY,
    delay: float = DEFAULT_DELAY,
) -> None:
    """Connect to the broker, wait ``delay`` seconds and send the greeting."""
    with AmqpPublisher(exchange, routing_key) as publisher:
        publisher.connect(hostname, port)
        time.sleep(delay)
        publisher.publish(GREETING)


def _publish_in_background(args: argparse.Namespace) -> None:
    try:
        publish_greeting(
            args.amqp_host, args.amqp_port, args.exchange, args.routing_key, args.delay
        )
    except PublisherError as exc:
        logger.error("%s", exc)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cbos", description="Answer framed API requests over TCP."
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--backlog", type=int, default=DEFAULT_BACKLOG)
    parser.add_argument("--amqp-host", default=DEFAULT_AMQP_HOST)
    parser.add_argument("--amqp-port", type=int, default=DEFAULT_AMQP_PORT)
    parser.add_argument("--exchange", default=DEFAULT_EXCHANGE)
    parser.add_argument("--routing-key", default=DEFAULT_ROUTING_KEY)
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help="seconds to wait after connecting before sending the greeting",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    logger.info("Starting AMQP Publisher (Producer)...")

    server = TcpServer(args.host, args.port, args.backlog)
    try:
        server.bind()
    except OSError as exc:
        logger.error("Cannot listen on port %d: %s", args.port, exc)
        return 1

    threading.Thread(target=_publish_in_background, args=(args,), daemon=True).start()

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.close()

    logger.info("AMQP Publisher is done!")
    return 0