"""A small TCP/UDP client socket wrapper."""

from __future__ import annotations

import socket
from enum import IntEnum
from types import TracebackType


class SocketType(IntEnum):
    """Transport used by a :class:`SocketClient`."""

    TCP = 0
    UDP = 1


class SocketClient:
    """Client side of an IPv4 TCP or UDP connection.

    Network failures never raise: they leave the client disconnected or make
    reads return empty results, so callers check :meth:`is_connected`.
    """

    def __init__(self, type: SocketType = SocketType.TCP, blocking: bool = False) -> None:
        self._type = SocketType(type)
        self._blocking = blocking
        self._socket: socket.socket | None = None
        self._connected = False

    def connect(self, address: str, port: int) -> None:
        """Connect to the dotted IPv4 ``address`` on ``port``.

        Raises ValueError if ``port`` is not a valid port number; any network
        failure just leaves the client disconnected.
        """
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port {port} out of range")

        self.disconnect()
        kind = socket.SOCK_STREAM if self._type is SocketType.TCP else socket.SOCK_DGRAM
        try:
            sock = socket.socket(socket.AF_INET, kind)
        except OSError:
            return
        self._socket = sock

        try:
            host = socket.inet_ntoa(socket.inet_aton(address))
            sock.connect((host, port))
        except OSError:
            self._connected = False
        else:
            self._connected = True

    def disconnect(self) -> None:
        """Close the socket, if any."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        self._connected = False

    def is_connected(self) -> bool:
        """True while the connection is believed to be usable."""
        return self._connected

    def _recv(self, size: int) -> bytes | None:
        """Receive up to ``size`` bytes; None on error or when no data is ready."""
        if self._socket is None:
            return None
        try:
            if not self._blocking:
                self._socket.setblocking(False)
            return self._socket.recv(size)
        except OSError:
            return None

    def read_bytes(self, size: int = 0x1000) -> bytes:
        """Read up to ``size`` bytes; empty if nothing could be read."""
        if not self._connected or size == 0:
            return b""
        data = self._recv(size)
        return data or b""

    def read_string(self, size: int = 0x1000) -> str:
        """Read up to ``size`` bytes and decode them as UTF-8."""
        return self.read_bytes(size).decode("utf-8", errors="replace")

    def read_bytes_until(self, delimiter: int | bytes) -> bytes:
        """Read byte by byte until ``delimiter``, which is not included.

        A read error or the peer closing the connection ends the read and
        marks the client disconnected.
        """
        if isinstance(delimiter, (bytes, bytearray)):
            if len(delimiter) != 1:
                raise ValueError("delimiter must be a single byte")
            delimiter = delimiter[0]

        result = bytearray()
        while self._connected:
            chunk = self._recv(1)
            if not chunk:
                self._connected = False
                break
            if chunk[0] == delimiter:
                break
            result += chunk
        return bytes(result)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Send ``data``; a failure marks the client disconnected."""
        if not self._connected or self._socket is None:
            return
        payload = bytes(data)
        if not payload:
            return
        try:
            self._socket.sendall(payload)
        except OSError:
            self._connected = False

    def write_string(self, string: str) -> None:
        """Send ``string`` encoded as UTF-8."""
        self.write_bytes(string.encode("utf-8"))

    def __enter__(self) -> SocketClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.disconnect()
        return False