"""String helpers: searching, comparison, slicing, splitting and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Normalise ``c``, an int code or a one-character string, to a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if c < 0:
        c %= 256
    return chr(c)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first unequal pair, else 0."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    for i in range(min(n, max(len(first), len(second)))):
        a, b = _code_at(first, i), _code_at(second, i)
        if a != b:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the difference of the first unequal pair, else 0."""
    return strncmp(first, second, max(len(first), len(second)))


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in ``big`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"negative length {length}")
    if len(little) > len(big):
        return None
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    return s.strip(chars)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of ``chars`` in place with ``func(index, char)``."""
    for i, ch in enumerate(chars):
        chars[i] = func(i, ch)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; a size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size < 1:
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    result = dst + src[:room]
    if size < len(dst):
        return result, len(src) + size
    return result, len(dst) + len(src)