"""Command line: answer distance queries between cities on a map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from .flights import FlightNetwork
from .grid import CityMap
from .roads import RoadGrid
from .text import parse_triple, to_int


def _take(stream: Iterator[str], count: int) -> list[str]:
    return [next(stream, "") for _ in range(count)]


def _answer(
    query: str,
    city_map: CityMap,
    roads: RoadGrid,
    network: FlightNetwork,
    use_flights: bool,
) -> str:
    origin, destination, kind = parse_triple(query)
    if origin == destination:
        return "0"
    path = roads.find_path(city_map.coordinates(origin), city_map.coordinates(destination))
    distance = len(path) - 1
    detailed = kind == 1
    if use_flights:
        route = network.fastest(origin, destination)
        if route is not None and (
            distance < 1 or (distance > route.time and route.time != 0)
        ):
            if detailed:
                return " ".join([str(route.time), *route.stops[:-1]])
            return str(route.time)
    if detailed:
        passed = (
            city_map.name_at(row, col) for row, col in path if city_map.is_city(row, col)
        )
        return " ".join(
            [str(distance), *(name for name in passed if name not in (origin, destination))]
        )
    return str(distance)


def run(lines: Iterable[str]) -> list[str]:
    """Read the map, flights and queries from ``lines`` and return the answers."""
    stream = (line.rstrip("\r\n") for line in lines)
    city_map = CityMap.from_lines(next(stream, ""), stream)
    roads = RoadGrid(city_map.passable())
    network = FlightNetwork()
    flight_count = 0
    count_line = next(stream, "")
    if count_line != "0":
        flight_count = to_int(count_line)
        network.load(_take(stream, flight_count))
    queries = _take(stream, to_int(next(stream, "")))
    return [
        _answer(query, city_map, roads, network, flight_count > 0) for query in queries
    ]


def main(argv: list[str] | None = None) -> int:
    """Answer the queries read from standard input."""
    parser = argparse.ArgumentParser(
        prog="cityroutes",
        description="Shortest road or flight connections between cities on a map.",
    )
    parser.parse_args(argv)
    for line in run(sys.stdin):
        print(line)
    return 0