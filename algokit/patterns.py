"""Text patterns drawn line by line."""

from __future__ import annotations

from string import ascii_uppercase


def mirror_pattern(n: int) -> list[str]:
    """Return lines of letters mirrored about their centre, one letter shorter each line.

    For ``n == 5`` the first line is ``ABCDEEDCBA`` and the last is ``AA``.
    """
    lines = []
    for width in range(n, 0, -1):
        half = "".join(chr(ord("A") + offset) for offset in range(width))
        lines.append(half + half[::-1])
    return lines


def star_cross(size: int) -> list[str]:
    """Return the lines of a plus sign of ``size`` rows drawn with asterisks.

    The row ``size // 2 + 1`` (counting from 1) is the bar; every other row is
    a single star indented by ``size // 2`` spaces.
    """
    middle = size // 2 + 1
    return [
        "*" * size if row == middle else " " * (size // 2) + "*"
        for row in range(1, size + 1)
    ]


__all__ = ["mirror_pattern", "star_cross", "ascii_uppercase"][:2]