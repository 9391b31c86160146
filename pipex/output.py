"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write a string followed by a newline."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    stream.write(str(int(n)))