import pytest

from algokit.eggdrop import egg_drop


def test_two_eggs_ten_floors():
    assert egg_drop(2, 10) == 4


def test_two_eggs_hundred_floors():
    assert egg_drop(2, 100) == 14


@pytest.mark.parametrize("floors", [0, 1])
def test_trivial_floors(floors):
    assert egg_drop(5, floors) == floors


@pytest.mark.parametrize("floors", [2, 7, 20])
def test_one_egg_tries_every_floor(floors):
    assert egg_drop(1, floors) == floors


@pytest.mark.parametrize("floors", [2, 7, 15, 30])
def test_plenty_of_eggs_is_binary_search(floors):
    assert egg_drop(floors, floors) == floors.bit_length()


def test_more_eggs_never_hurt():
    results = [egg_drop(eggs, 25) for eggs in range(1, 6)]
    assert results == sorted(results, reverse=True)


def test_negative_arguments():
    with pytest.raises(ValueError):
        egg_drop(-1, 5)
    with pytest.raises(ValueError):
        egg_drop(2, -5)


def test_no_eggs_for_several_floors():
    with pytest.raises(ValueError):
        egg_drop(0, 4)