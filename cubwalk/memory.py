"""Byte-buffer helpers working on ``bytearray`` and other buffers."""

from __future__ import annotations

_CALLOC_LIMIT = 2147483647


def _check_length(name: str, buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    if n > len(buffer):
        raise ValueError(f"{name}: length {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (low 8 bits) and return it."""
    _check_length("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    if min(dest, src, n) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("range exceeds buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (low 8 bits) among the first ``n``, or None."""
    _check_length("data", data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, else 0."""
    _check_length("first", first, n)
    _check_length("second", second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes; raises MemoryError above 2**31 - 1 bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > _CALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)