# wolvlib

A collection of small utilities with no third-party dependencies.

## Modules

- `wolvlib.strings`
  - `split_string(string, delimiter, remove_empty=False)`: an empty string or
    an empty delimiter gives a one-item list holding the input.
  - `combine_strings`, `replace_strings` (an empty search string leaves the
    input unchanged), `trim` (strips spaces, tabs, `\n`, `\r` and NUL).
  - `replace_tabs_with_spaces(string, tab_size=4)` expands tabs to the next tab
    stop on each line; `preprocess_text` also turns `\r\n` and `\r` into `\n`.
  - `wrap_monospaced_string(string, char_width, max_width)` breaks lines after
    the last space or punctuation mark that fits, and splits words that are
    longer than a line.
  - `capitalize_string` upper-cases the first letter of words separated by
    `_`, `-` or a space.
  - `strnlen(data, limit)` counts items before the first NUL, up to `limit`.
  - UTF conversions: `utf16_to_utf8` (code units in, bytes out),
    `utf8_to_utf16` (bytes in, code units out), `utf8_to_utf32`
    (bytes in, code points out; `allow_invalid=True` passes bad lead bytes
    through) and `utf32_to_utf8` (code points or a `str` in, bytes out).
    Malformed input raises `ValueError`.
- `wolvlib.charconv`
  - `parse_int(string, base=0)`: with base 0 the text is trimmed and a `0x`,
    `0o` or `0b` prefix picks the base, otherwise decimal. Trailing characters
    are ignored; no digits raises `ValueError`.
  - `parse_float(string)`: decimal and exponent notation, `inf`, `infinity`,
    `nan`. Leading whitespace and `+` are not accepted; out-of-range values
    raise `ValueError`.
- `wolvlib.core`
  - `to_bytes(value, size=4, signed=False)`: the host-order bytes of an
    integer (1, 2, 4, 8 or 16 bytes) or a float (4 or 8 bytes).
  - `kib`, `mib`, `gib`: byte counts, wrapped to 64 bits.
- `wolvlib.expected`: `Expected` holds a value, or an error when built from
  `Unexpected(error)`. It has `has_value()`, `value()`, `error()` (each raises
  `ValueError` when the other side is held), `value_or(default)`, truthiness
  and equality with values, errors and other `Expected` objects.
- `wolvlib.guards`
  - `ScopeGuard(func)`: a context manager that calls `func` when the block is
    left, unless `release()` was called. If the block raised, errors from
    `func` are swallowed.
  - `first_time(func)`: calls `func` only the first time its definition is
    seen; returns whether it ran.
  - `final_cleanup(func)`: registers `func` once to run at interpreter exit.
- `wolvlib.lock`: `ScopedTryLock(lock)` tries once, without waiting, to
  acquire `lock`; it is truthy if it succeeded and releases the lock on
  `release()` or at the end of a `with` block.
- `wolvlib.thread_pool`: `ThreadPool(thread_count)` with `enqueue(task)`,
  `stop()` and `stop_tasks()`. Each task is called with a `threading.Event`
  that is set when the pool asks running tasks to finish.
- `wolvlib.socket_client`: `SocketClient(type=SocketType.TCP, blocking=False)`
  with `connect`, `disconnect`, `is_connected`, `read_bytes`, `read_string`,
  `read_bytes_until`, `write_bytes` and `write_string`. Network failures do
  not raise; they leave the client disconnected or give empty reads.
- `wolvlib.socket_server`: `SocketServer(port, buffer_size=1024,
  max_client_count=5, local_only=True)`. `accept(callback, close_callback=None,
  keep_alive=False)` takes one pending client, if any, and serves it on a pool
  thread: data is read until the client goes quiet, passed to
  `callback(client, data)`, and whatever it returns is sent back. Also
  `send`, `shutdown`, `error`, `is_listening`, `is_active` and
  `disconnect_clients`.

## Install

    pip install .

## Examples

```python
from wolvlib.strings import split_string, wrap_monospaced_string
from wolvlib.charconv import parse_int
from wolvlib.guards import ScopeGuard

split_string("house window tree", " ")      # ['house', 'window', 'tree']
wrap_monospaced_string("house", 1, 2)        # 'ho\nus\ne'
parse_int("0x1F")                            # 31

with ScopeGuard(lambda: print("leaving")):
    ...                                      # prints "leaving" on exit
```

```python
from wolvlib.thread_pool import ThreadPool

pool = ThreadPool(2)
pool.enqueue(lambda should_stop: print("working"))
pool.stop()
```

## Limits

- The sockets are IPv4 only and carry no encryption.
- `SocketServer.accept` does not wait for a client; call it in a loop.
- There is no command-line program; this is a library only.

## Tests

    pip install .[test]
    pytest