import socket
import struct
import threading

import pytest

from algolab.board import BoardClient, BoardServer, MessageBoard


@pytest.fixture
def server():
    board = MessageBoard()
    srv = BoardServer(("127.0.0.1", 0), board)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    host, port = srv.server_address[:2]
    yield host, port, board
    srv.shutdown()
    srv.server_close()
    thread.join(timeout=10)


def _read_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        assert chunk
        data += chunk
    return data


def test_board_keeps_order_and_returns_copies():
    board = MessageBoard()
    board.post("first")
    board.post("second")
    snapshot = board.messages()
    snapshot.append("extra")
    assert board.messages() == ["first", "second"]
    assert len(board) == 2


def test_empty_fetch(server):
    host, port, _ = server
    with BoardClient(host, port) as client:
        assert client.fetch() == []


def test_broadcast_then_fetch(server):
    host, port, board = server
    with BoardClient(host, port) as client:
        client.broadcast("hello")
        client.broadcast("world")
        assert client.fetch() == ["hello", "world"]
    assert board.messages() == ["hello", "world"]


def test_messages_are_shared_between_clients(server):
    host, port, _ = server
    with BoardClient(host, port) as first, BoardClient(host, port) as second:
        first.broadcast("from-first")
        assert first.fetch() == ["from-first"]
        second.broadcast("from-second")
        assert second.fetch() == ["from-first", "from-second"]


def test_oversized_message_rejected(server):
    host, port, _ = server
    with BoardClient(host, port) as client:
        with pytest.raises(ValueError):
            client.broadcast("x" * 1024)
        assert client.fetch() == []


def test_raw_wire_protocol(server):
    host, port, _ = server
    with socket.create_connection((host, port)) as sock:
        sock.sendall(struct.pack("<i", 2) + b"ping".ljust(1024, b"\0"))
        sock.sendall(struct.pack("<i", 1))
        assert struct.unpack("<i", _read_exact(sock, 4)) == (1,)
        chunk = _read_exact(sock, 1024)
        assert chunk.rstrip(b"\0") == b"ping"
        assert len(chunk) == 1024