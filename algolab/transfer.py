"""Word-by-word file upload over a stream socket.

The sender first writes the number of words as a 4-byte little-endian
integer. It then writes each word in a fixed-size, NUL-padded chunk. The
receiver appends the words to a file, each followed by a space.
"""

from __future__ import annotations

import os
import socket
import struct

DEFAULT_CHUNK_SIZE = 255
DEFAULT_PORT = 10000

_COUNT = struct.Struct("<i")


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ConnectionError."""
    buffer = bytearray()
    while len(buffer) < size:
        part = sock.recv(size - len(buffer))
        if not part:
            raise ConnectionError("connection closed before all data arrived")
        buffer += part
    return bytes(buffer)


def _recv_int(sock: socket.socket) -> int:
    (value,) = _COUNT.unpack(_recv_exact(sock, _COUNT.size))
    return value


def _pack_field(text: str, size: int) -> bytes:
    """Encode ``text`` into a NUL-terminated field of exactly ``size`` bytes."""
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError("text must not contain NUL characters")
    if len(data) >= size:
        raise ValueError(f"{text!r} does not fit in a {size}-byte field")
    return data.ljust(size, b"\0")


def _unpack_field(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size < 1:
        raise ValueError("chunk size must be positive")


def count_words(text: str) -> int:
    """Number of whitespace-separated words in ``text``."""
    return len(text.split())


def send_words(sock: socket.socket, text: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Send the words of ``text`` and return how many were sent."""
    _check_chunk_size(chunk_size)
    words = text.split()
    fields = [_pack_field(word, chunk_size) for word in words]
    sock.sendall(_COUNT.pack(len(words)) + b"".join(fields))
    return len(words)


def receive_words(sock: socket.socket, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Read a word count and that many word chunks from ``sock``."""
    _check_chunk_size(chunk_size)
    count = _recv_int(sock)
    if count < 0:
        raise ValueError(f"invalid word count {count}")
    return [_unpack_field(_recv_exact(sock, chunk_size)) for _ in range(count)]


def upload(
    host: str,
    port: int = DEFAULT_PORT,
    source: str | os.PathLike[str] = "first.txt",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Send the words of the file ``source`` to ``host:port``; return the count."""
    with open(source, encoding="utf-8") as handle:
        text = handle.read()
    with socket.create_connection((host, port)) as sock:
        return send_words(sock, text, chunk_size)


def serve_upload(
    server_socket: socket.socket,
    destination: str | os.PathLike[str] = "received.txt",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[str]:
    """Accept one upload on a listening socket and append it to ``destination``."""
    connection, _ = server_socket.accept()
    with connection:
        words = receive_words(connection, chunk_size)
    with open(destination, "a", encoding="utf-8") as out:
        out.writelines(f"{word} " for word in words)
    return words