"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _wrap32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, low: int, high: int, shift: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    return _convert(c, 97, 122, -32)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    return _convert(c, 65, 90, 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits like a C ``int``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - 48)
    return _wrap32(_wrap32(number) * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)