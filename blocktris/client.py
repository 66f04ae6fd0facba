"""TCP client that exchanges fixed-size ``query/data`` messages."""

import socket

from blocktris.textutil import ProgramError

BUFFER_SIZE = 1024
MESSAGE_SIZE = BUFFER_SIZE - 1


class Client:
    """A connection to the game server."""

    def __init__(self, ip: str, port: int, timeout: "float | None" = None):
        self.ip = ip
        self.port = port
        try:
            self._sock = socket.create_connection((ip, port), timeout=timeout)
        except OSError as exc:
            raise ProgramError("connect() error!") from exc

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, query: str, data: str) -> str:
        """Send ``query/data`` and return the server's reply."""
        payload = f"{query}/{data}".encode("utf-8")
        if len(payload) >= MESSAGE_SIZE:
            raise ValueError("message too long")
        self._sock.sendall(payload.ljust(MESSAGE_SIZE, b"\0"))
        received = bytearray()
        while len(received) < MESSAGE_SIZE:
            chunk = self._sock.recv(MESSAGE_SIZE - len(received))
            if not chunk:
                break
            received += chunk
        return bytes(received).split(b"\0", 1)[0].decode("utf-8", errors="replace")

    def close(self) -> None:
        self._sock.close()