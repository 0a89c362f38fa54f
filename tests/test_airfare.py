import pytest

from algokit.airfare import UnknownCityError, city_index, travel_cost


def test_city_index():
    assert city_index("Delhi") == 0
    assert city_index("Kanpur") == 5


def test_unknown_city_index():
    with pytest.raises(UnknownCityError):
        city_index("delhi")


def test_worked_example():
    assert travel_cost(["Kolkata", "Kanpur", "Goa", "Pune", "Delhi"]) == 9720


def test_single_leg():
    assert travel_cost(["Delhi", "Kolkata"]) == 3525


def test_fares_are_symmetric():
    assert travel_cost(["Pune", "Goa"]) == travel_cost(["Goa", "Pune"])


def test_no_legs_cost_nothing():
    assert travel_cost([]) == 0
    assert travel_cost(["Mumbai"]) == 0
    assert travel_cost(["Mumbai", "Mumbai"]) == 0


def test_route_cost_is_sum_of_legs():
    route = ["Delhi", "Goa", "Mumbai"]
    assert travel_cost(route) == travel_cost(route[:2]) + travel_cost(route[1:])


def test_unknown_city_in_route():
    with pytest.raises(UnknownCityError):
        travel_cost(["Delhi", "Atlantis"])