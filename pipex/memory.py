"""Byte buffer helpers working on bytearray and writable buffers."""

from __future__ import annotations

from typing import Optional


def _check_length(name: str, buf, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, fewer than {n}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length("buf", buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length("buf", buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into ``dest``; overlapping views are safe."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    # Snapshot the source first so overlapping regions copy correctly.
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length("buf", buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length("s1", s1, n)
    _check_length("s2", s2, n)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0