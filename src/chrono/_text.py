from __future__ import annotations

from typing import Sequence

from ._exceptions import ChronoFormatError, NullInputError


def split_digits(text: str | None, widths: Sequence[int]) -> tuple[int, ...]:
    """
    Split fixed-width, separator-free numeric text into integers.

    ``split_digits("20240229", (4, 2, 2))`` -> ``(2024, 2, 29)``.
    Only ASCII digits are accepted; signs, blanks and underscores that
    ``int()`` would tolerate are rejected.
    """
    if text is None:
        raise NullInputError("Cannot parse None; a string is required.")
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}.")

    expected = sum(widths)
    if len(text) != expected:
        raise ChronoFormatError(text, f"expected {expected} characters, got {len(text)}")

    parts: list[int] = []
    pos = 0
    for width in widths:
        chunk = text[pos:pos + width]
        if not (chunk.isascii() and chunk.isdigit()):
            raise ChronoFormatError(text, f"{chunk!r} at offset {pos} is not numeric")
        parts.append(int(chunk))
        pos += width
    return tuple(parts)
