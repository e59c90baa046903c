import pytest

from cityroutes.flights import FlightNetwork, Route


def test_cities_get_indices_in_order():
    network = FlightNetwork()
    assert network.add_city("X") == 0
    assert network.add_city("Y") == 1
    assert network.add_city("X") == 0
    assert network.city_name(0) == "X"
    assert network.city_name(1) == "Y"


def test_city_name_out_of_range():
    network = FlightNetwork()
    network.add_city("X")
    with pytest.raises(IndexError):
        network.city_name(1)
    with pytest.raises(IndexError):
        network.city_name(-1)


def test_direct_flight():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    assert network.fastest("A", "B") == Route(5, ["B"])


def test_shorter_duplicate_is_kept():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    network.add_flight("A", "B", 3)
    network.add_flight("A", "B", 7)
    assert network.fastest("A", "B").time == 3


def test_zero_time_flight_removes_connection():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    network.add_flight("A", "B", 0)
    assert network.fastest("A", "B") is None


def test_flights_are_one_way():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    assert network.fastest("B", "A") is None


def test_unknown_city_has_no_route():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    assert network.fastest("A", "Z") is None
    assert network.fastest("Z", "A") is None


def test_route_through_intermediate_city():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    network.add_flight("A", "C", 1)
    network.add_flight("C", "B", 1)
    route = network.fastest("A", "B")
    assert route.stops == ["C", "B"]
    assert route.time < 5


def test_same_city_is_free():
    network = FlightNetwork()
    network.add_flight("A", "B", 5)
    assert network.fastest("A", "A") == Route(0, [])


def test_load_parses_lines():
    network = FlightNetwork()
    network.load(["A B 4", "B C 6"])
    assert [network.city_name(i) for i in range(3)] == ["A", "B", "C"]
    assert network.fastest("A", "C").stops == ["B", "C"]
    assert network.fastest("A", "B").time == 4


def test_route_time_matches_legs():
    network = FlightNetwork()
    network.load(["A B 4", "B C 6", "A C 20"])
    route = network.fastest("A", "C")
    legs = network.fastest("A", "B").time + network.fastest("B", "C").time
    assert route.time == legs