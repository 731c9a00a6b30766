"""TCP server answering framed API requests."""

from __future__ import annotations

import logging
import socket
import threading

from .parser import parse_frame

logger = logging.getLogger(__name__)

DEFAULT_PORT = 4444
DEFAULT_BACKLOG = 50
RECV_SIZE = 100_000
_ACCEPT_POLL_SECONDS = 0.5


def handle_client(connection: socket.socket) -> None:
    """Answer every chunk received on a connection until the peer closes it."""
    with connection:
        while True:
            try:
                data = connection.recv(RECV_SIZE)
            except OSError as exc:
                logger.error("Failed to receive data: %s", exc)
                break
            if not data:
                break

            reply = parse_frame(data)
            logger.info("Returned from parser: %s", reply)
            try:
                connection.sendall(reply.encode("utf-8"))
            except OSError as exc:
                logger.error("Failed to send response: %s", exc)
            else:
                logger.info("Sent response")


class TcpServer:
    """Listens for clients and serves each one on its own thread."""

    def __init__(
        self, host: str = "", port: int = DEFAULT_PORT, backlog: int = DEFAULT_BACKLOG
    ) -> None:
        self.host = host
        self.port = port
        self.backlog = backlog
        self._socket: socket.socket | None = None
        self._closing = threading.Event()

    def bind(self) -> tuple[str, int]:
        """Create the listening socket and return the address it is bound to."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.listen(self.backlog)
            sock.settimeout(_ACCEPT_POLL_SECONDS)
        except OSError:
            sock.close()
            raise
        self._socket = sock
        self._closing.clear()
        host, port = sock.getsockname()[:2]
        logger.info("[*] Listening on port %d...", port)
        return host, port

    def _reinitialize(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        self.bind()

    def serve_forever(self) -> None:
        """Accept clients until close() is called."""
        if self._socket is None:
            self.bind()
        while not self._closing.is_set():
            sock = self._socket
            if sock is None:
                break
            try:
                connection, address = sock.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if self._closing.is_set():
                    break
                logger.error("Error accepting connection: %s", exc)
                self._reinitialize()
                continue

            connection.settimeout(None)
            logger.info("[*] Accepted connection from %s:%d", address[0], address[1])
            threading.Thread(
                target=handle_client, args=(connection,), daemon=True
            ).start()

    def close(self) -> None:
        """Stop serving and release the listening socket."""
        self._closing.set()
        sock, self._socket = self._socket, None
        if sock is not None:
            sock.close()