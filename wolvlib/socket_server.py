"""A TCP server that hands each client to a worker thread."""

from __future__ import annotations

import socket
import threading
from collections.abc import Callable
from functools import partial
from types import TracebackType

from .thread_pool import ThreadPool

ReadCallback = Callable[[socket.socket, bytes], "bytes | None"]
CloseCallback = Callable[[socket.socket], object]

_CLIENT_TIMEOUT = 0.1


class SocketServer:
    """Listens on an IPv4 TCP port and serves clients from a thread pool.

    Each accepted client is read until it goes quiet; the collected bytes go
    to the read callback and whatever it returns is sent back.
    """

    def __init__(
        self,
        port: int,
        buffer_size: int = 1024,
        max_client_count: int = 5,
        local_only: bool = True,
    ) -> None:
        self._buffer_size = buffer_size
        self._max_client_count = max_client_count
        self._local_only = local_only
        self._error: int | None = None
        self._socket: socket.socket | None = None
        self._pool = ThreadPool(max(max_client_count, 0))

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError:
            return

        host = "127.0.0.1" if local_only else "0.0.0.0"
        try:
            sock.bind((host, port))
            option = getattr(socket, "SO_REUSEPORT", socket.SO_REUSEADDR)
            sock.setsockopt(socket.SOL_SOCKET, option, 1)
            sock.setblocking(False)
            sock.listen(max_client_count)
        except OSError as exc:
            sock.close()
            self._error = exc.errno if exc.errno is not None else -1
            return

        self._socket = sock

    def accept(
        self,
        callback: ReadCallback,
        close_callback: CloseCallback | None = None,
        keep_alive: bool = False,
    ) -> None:
        """Accept one pending client, if any, and serve it on a worker thread."""
        if self._socket is None:
            return
        try:
            client, _ = self._socket.accept()
        except OSError:
            return
        self._pool.enqueue(partial(self._run_client, client, callback, close_callback, keep_alive))

    def send(self, client: socket.socket, data: bytes | str) -> None:
        """Send ``data`` to ``client``; strings are encoded as UTF-8."""
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        try:
            client.sendall(payload)
        except OSError:
            pass

    def shutdown(self) -> None:
        """Stop all client handlers and close the listening socket."""
        self._pool.stop()
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def error(self) -> int | None:
        """The errno of a failed bind or listen, or None."""
        return self._error

    def is_listening(self) -> bool:
        """True unless binding or listening failed."""
        return self._error is None

    def is_active(self) -> bool:
        """True while the listening socket is open."""
        return self._socket is not None

    def disconnect_clients(self) -> None:
        """End every client connection and wait until the handlers are idle."""
        self._pool.stop_tasks()

    def __enter__(self) -> SocketServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.shutdown()
        return False

    def _run_client(
        self,
        client: socket.socket,
        callback: ReadCallback,
        close_callback: CloseCallback | None,
        keep_alive: bool,
        should_stop: threading.Event,
    ) -> None:
        try:
            self._handle_client(client, keep_alive, should_stop, callback)
        except Exception:
            pass  # the connection is closed gracefully below

        try:
            if close_callback is not None:
                close_callback(client)
        finally:
            client.close()

    def _handle_client(
        self,
        client: socket.socket,
        keep_alive: bool,
        should_stop: threading.Event,
        callback: ReadCallback,
    ) -> None:
        data = bytearray()
        client.settimeout(_CLIENT_TIMEOUT)

        while not should_stop.is_set():
            failed = False
            would_block = False
            try:
                chunk = client.recv(self._buffer_size)
            except (TimeoutError, BlockingIOError):
                failed = would_block = True
                chunk = b""
            except OSError:
                failed = True
                chunk = b""

            if chunk:
                data += chunk
                continue

            if data:
                response = callback(client, bytes(data))
                if response:
                    client.sendall(bytes(response))
                data.clear()
                if not keep_alive:
                    break

            if failed and would_block:
                continue
            break