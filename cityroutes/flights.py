"""Directed flight connections and the fastest way through them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .text import parse_triple


class Route(NamedTuple):
    """Total flight time and the cities landed in, the destination last."""

    time: int
    stops: list[str]


class FlightNetwork:
    """Cities joined by one-way flights, each with a travel time.

    A time of zero means that there is no flight. A later zero-time flight
    therefore removes a connection that was added before it.
    """

    def __init__(self) -> None:
        self.cities: dict[str, int] = {}
        self._names: list[str] = []
        self._times: dict[int, dict[int, int]] = {}

    def add_city(self, name: str) -> int:
        """Register ``name`` if it is new and return its index."""
        if name not in self.cities:
            self.cities[name] = len(self._names)
            self._names.append(name)
        return self.cities[name]

    def add_flight(self, origin: str, destination: str, time: int) -> None:
        """Record a flight, keeping the shorter time when one already exists."""
        source = self.add_city(origin)
        target = self.add_city(destination)
        legs = self._times.setdefault(source, {})
        current = legs.get(target, 0)
        if current == 0 or current > time:
            legs[target] = time

    def load(self, lines: Iterable[str]) -> None:
        """Add one flight for each ``"<origin> <destination> <time>"`` line."""
        flights = [parse_triple(line) for line in lines]
        for origin, destination, _ in flights:
            self.add_city(origin)
            self.add_city(destination)
        for origin, destination, time in flights:
            self.add_flight(origin, destination, time)

    def city_name(self, index: int) -> str:
        """Name of the city with the given index."""
        if not 0 <= index < len(self._names):
            raise IndexError(f"no city with index {index}")
        return self._names[index]

    def fastest(self, origin: str, destination: str) -> Route | None:
        """Fastest route between two cities, or ``None`` if there is none."""
        if origin not in self.cities or destination not in self.cities:
            return None
        start = self.cities[origin]
        end = self.cities[destination]
        dist = {start: 0}
        previous: dict[int, int] = {}
        visited: set[int] = set()
        while True:
            candidates = [(d, i) for i, d in dist.items() if i not in visited]
            if not candidates:
                break
            current_dist, current = min(candidates)
            if current == end:
                break
            visited.add(current)
            for target, time in self._times.get(current, {}).items():
                if time == 0 or target in visited:
                    continue
                candidate = current_dist + time
                if target not in dist or candidate < dist[target]:
                    dist[target] = candidate
                    previous[target] = current
        if end not in dist:
            return None
        stops = []
        node = end
        while node != start:
            stops.append(self._names[node])
            node = previous[node]
        stops.reverse()
        return Route(dist[end], stops)