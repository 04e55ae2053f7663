"""Small utilities: strings, number parsing, a result type, guards, a try-lock, a thread pool and sockets."""

__version__ = "0.1.0"
__all__ = [
    "strings",
    "charconv",
    "core",
    "expected",
    "guards",
    "lock",
    "thread_pool",
    "socket_client",
    "socket_server",
]