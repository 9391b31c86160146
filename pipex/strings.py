"""String helpers: conversion, searching, splitting, trimming and bounded copies.

Searches return an index into the string, or None when nothing is found.
Bounded copy and concatenation return the resulting string together with
the length the caller would have needed.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[int, str]

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"
_NUL = "\0"


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first character that is not a digit; text without
    digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [word for word in s.split(_as_char(sep)) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator NUL matches at ``len(s)``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator NUL matches at ``len(s)``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def striteri(
    s: Optional[MutableSequence],
    f: Optional[Callable[[int, object], object]],
) -> None:
    """Call ``f(index, item)`` for each item of ``s`` and store what it returns.

    When ``f`` returns None the item is left unchanged. Nothing happens if
    either argument is missing.
    """
    if s is None or f is None:
        return
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence, such as a list of characters")
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strjoin(s1: Optional[str], s2: str) -> Optional[str]:
    """Concatenate two strings; a missing first string gives None."""
    if s1 is None:
        return None
    return s1 + s2


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters with terminator.

    Returns the resulting string and the length the full concatenation would
    have had.
    """
    _check_non_negative("size", size)
    dest_len = len(dest)
    src_len = len(src)
    if not src:
        return dest, dest_len
    if size == 0 or size < dest_len:
        return dest, src_len + size
    room = max(0, size - 1 - dest_len)
    return dest + src[:room], dest_len + src_len


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters with terminator.

    Returns the resulting string and the length of ``src``. With a size of
    zero the destination is left as it was.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strmapi(
    s: Optional[str],
    f: Optional[Callable[[int, str], str]],
) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    _check_non_negative("n", n)
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0 or index == n - 1:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters of ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    if s is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    length = min(length, len(s))
    return s[start : start + length]