"""Non-blocking scoped lock acquisition."""

from __future__ import annotations

from types import TracebackType
from typing import Any


class ScopedTryLock:
    """Tries once, without waiting, to acquire ``lock``.

    The object is truthy when the lock was taken; the lock is released when
    the ``with`` block ends or :meth:`release` is called.
    """

    def __init__(self, lock: Any) -> None:
        self._lock = lock
        self._locked = bool(lock.acquire(blocking=False))

    def release(self) -> None:
        """Release the lock if this object holds it."""
        if self._locked and self._lock is not None:
            self._lock.release()
        self._locked = False

    def __enter__(self) -> ScopedTryLock:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.release()
        return False

    def __bool__(self) -> bool:
        return self._locked and self._lock is not None