import socket
import threading

import pytest

from blocktris.client import MESSAGE_SIZE, Client
from blocktris.textutil import ProgramError


def _serve_once(reply):
    listener = socket.create_server(("127.0.0.1", 0))
    received = []

    def handle():
        conn, _ = listener.accept()
        with conn:
            data = b""
            while len(data) < MESSAGE_SIZE:
                chunk = conn.recv(MESSAGE_SIZE - len(data))
                if not chunk:
                    break
                data += chunk
            received.append(data)
            conn.sendall(reply.ljust(MESSAGE_SIZE, b"\0"))
        listener.close()

    thread = threading.Thread(target=handle, daemon=True)
    thread.start()
    return listener.getsockname()[1], received, thread


def test_request_round_trip_and_close():
    port, received, thread = _serve_once(b"alice/bob")
    with Client("127.0.0.1", port, timeout=5) as client:
        reply = client.request("login", "data")
    thread.join(timeout=5)
    assert reply == "alice/bob"
    assert len(received[0]) == MESSAGE_SIZE
    assert received[0].split(b"\0", 1)[0] == b"login/data"
    with pytest.raises(OSError):
        client.request("login", "data")


def test_too_long_message_rejected():
    port, _, thread = _serve_once(b"")
    client = Client("127.0.0.1", port, timeout=5)
    try:
        with pytest.raises(ValueError):
            client.request("q", "x" * MESSAGE_SIZE)
    finally:
        client.close()
        thread.join(timeout=5)


def test_connection_failure_raises_program_error():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ProgramError):
        Client("127.0.0.1", port, timeout=2)