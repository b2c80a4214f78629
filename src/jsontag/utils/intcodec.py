"""Decimal text conversion for integers of any size.

CPython refuses ``str(n)`` and ``int(text)`` beyond a configurable digit
count (4300 by default). These helpers work in fixed-size chunks that stay
under that limit, so big-integer envelopes round-trip at any magnitude
without touching the interpreter-wide setting.
"""

from __future__ import annotations

_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def int_to_decimal(value: int) -> str:
    """Render an integer as its canonical base-10 string.

    Args:
        value: Integer of any magnitude

    Returns:
        Decimal digits, with a leading ``-`` for negative values

    Example:
        >>> int_to_decimal(-(10**5000)) == "-1" + "0" * 5000
        True
    """
    value = int(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    if value < _CHUNK:
        return sign + str(value)

    # Least significant chunk first
    chunks = []
    while value:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(chunk)

    head = str(chunks.pop())
    return sign + head + "".join(str(chunk).zfill(_CHUNK_DIGITS) for chunk in reversed(chunks))


def decimal_to_int(text: str) -> int:
    """Parse an optionally signed string of ASCII digits.

    The caller is responsible for validating the literal; this only lifts
    the digit-count limit off int().

    Args:
        text: Decimal literal such as ``"-123"``

    Returns:
        Parsed integer
    """
    negative = text.startswith("-")
    digits = text[1:] if text.startswith(("+", "-")) else text

    # First slice takes the remainder so every later slice is a full chunk
    first = len(digits) % _CHUNK_DIGITS or _CHUNK_DIGITS
    value = int(digits[:first])
    for start in range(first, len(digits), _CHUNK_DIGITS):
        value = value * _CHUNK + int(digits[start : start + _CHUNK_DIGITS])

    return -value if negative else value
