"""A shared message board served to many clients over TCP.

Each request starts with a 4-byte little-endian status. Status 1 fetches
the board: the server replies with a message count, then one fixed-size
chunk per message. Any other status posts one fixed-size message chunk.
"""

from __future__ import annotations

import socket
import socketserver
import threading

from algolab.transfer import _COUNT, _pack_field, _recv_exact, _recv_int, _unpack_field

MESSAGE_SIZE = 1024
DEFAULT_PORT = 10000
FETCH = 1
BROADCAST = 2


def _fit(message: str) -> bytes:
    data = message.encode("utf-8").replace(b"\0", b"")[: MESSAGE_SIZE - 1]
    return data.ljust(MESSAGE_SIZE, b"\0")


class MessageBoard:
    """Thread-safe, ordered list of posted messages."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[str] = []

    def post(self, message: str) -> None:
        """Append a message."""
        with self._lock:
            self._messages.append(message)

    def messages(self) -> list[str]:
        """A copy of all messages in posting order."""
        with self._lock:
            return list(self._messages)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


class _BoardHandler(socketserver.BaseRequestHandler):
    def handle(self) -> None:
        board: MessageBoard = self.server.board
        sock = self.request
        while True:
            try:
                status = _recv_int(sock)
                if status == FETCH:
                    messages = board.messages()
                    sock.sendall(_COUNT.pack(len(messages)) + b"".join(map(_fit, messages)))
                else:
                    board.post(_unpack_field(_recv_exact(sock, MESSAGE_SIZE)))
            except (ConnectionError, OSError):
                return


class BoardServer(socketserver.ThreadingTCPServer):
    """Serves one board to any number of clients, one thread per client."""

    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, address: tuple[str, int], board: MessageBoard | None = None) -> None:
        self.board = board if board is not None else MessageBoard()
        super().__init__(address, _BoardHandler)


class BoardClient:
    """Connection to a board server."""

    def __init__(self, host: str, port: int = DEFAULT_PORT) -> None:
        self._sock = socket.create_connection((host, port))

    def fetch(self) -> list[str]:
        """All messages currently on the board."""
        self._sock.sendall(_COUNT.pack(FETCH))
        count = _recv_int(self._sock)
        return [_unpack_field(_recv_exact(self._sock, MESSAGE_SIZE)) for _ in range(count)]

    def broadcast(self, message: str) -> None:
        """Post a message to the board."""
        field = _pack_field(message, MESSAGE_SIZE)
        self._sock.sendall(_COUNT.pack(BROADCAST) + field)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> BoardClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()