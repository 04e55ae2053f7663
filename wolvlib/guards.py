"""Scope guards and run-once / run-at-exit helpers."""

from __future__ import annotations

import atexit
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any

_registry_lock = threading.Lock()
_first_time_seen: set[Any] = set()
_cleanup_seen: set[Any] = set()


def _site_key(func: Callable[[], Any]) -> Any:
    # Functions defined at the same place share a code object, which makes
    # "once" mean once per definition site, as with a static local.
    return getattr(func, "__code__", func)


class ScopeGuard:
    """Calls ``func`` when the ``with`` block it guards is left.

    If the block is left by an exception, anything raised by ``func`` is
    swallowed so the original exception propagates.
    """

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func
        self._active = True

    def release(self) -> None:
        """Disarm the guard so ``func`` is not called."""
        self._active = False

    def __enter__(self) -> ScopeGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if not self._active:
            return False
        self._active = False
        if exc_type is None:
            self._func()
        else:
            try:
                self._func()
            except Exception:
                pass
        return False


def first_time(func: Callable[[], Any]) -> bool:
    """Call ``func`` the first time its definition is seen.

    Returns True if it was called now, False if it had run before.
    """
    key = _site_key(func)
    with _registry_lock:
        if key in _first_time_seen:
            return False
        _first_time_seen.add(key)
    func()
    return True


def final_cleanup(func: Callable[[], Any]) -> Callable[[], Any]:
    """Arrange for ``func`` to run once when the interpreter exits.

    Registering the same definition again has no further effect. Returns
    ``func`` so it can be used as a decorator.
    """
    key = _site_key(func)
    with _registry_lock:
        if key in _cleanup_seen:
            return func
        _cleanup_seen.add(key)
    atexit.register(func)
    return func