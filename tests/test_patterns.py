import pytest

from algokit.patterns import mirror_pattern, star_cross


def test_mirror_pattern_documented_example():
    assert mirror_pattern(5) == ["ABCDEEDCBA", "ABCDDCBA", "ABCCBA", "ABBA", "AA"]


@pytest.mark.parametrize("n", [1, 3, 7, 12])
def test_mirror_pattern_lines_are_palindromes(n):
    lines = mirror_pattern(n)
    assert len(lines) == n
    for index, line in enumerate(lines):
        assert line == line[::-1]
        assert len(line) == 2 * (n - index)


def test_mirror_pattern_empty():
    assert mirror_pattern(0) == []


def test_star_cross_five():
    assert star_cross(5) == ["  *", "  *", "*****", "  *", "  *"]


@pytest.mark.parametrize("size", [1, 3, 7, 9])
def test_star_cross_shape(size):
    lines = star_cross(size)
    assert len(lines) == size
    assert lines[size // 2] == "*" * size
    others = [line for i, line in enumerate(lines) if i != size // 2]
    assert all(line == " " * (size // 2) + "*" for line in others)


def test_star_cross_empty():
    assert star_cross(0) == []