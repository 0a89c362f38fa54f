"""The egg-dropping puzzle: fewest drops that find the critical floor in the worst case."""

from __future__ import annotations


def egg_drop(eggs: int, floors: int) -> int:
    """Return the minimum number of drops needed in the worst case.

    With zero or one floor the answer is the number of floors; with one egg
    every floor must be tried.
    """
    if eggs < 0 or floors < 0:
        raise ValueError("eggs and floors must not be negative")
    if floors <= 1:
        return floors
    if eggs == 0:
        raise ValueError("at least one egg is needed to test a floor")

    previous = list(range(floors + 1))  # one egg
    for _ in range(2, eggs + 1):
        current = [0, 1] + [0] * (floors - 1)
        for floor in range(2, floors + 1):
            current[floor] = 1 + min(
                max(previous[k - 1], current[floor - k]) for k in range(1, floor + 1)
            )
        previous = current
    return previous[floors]