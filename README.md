# cityroutes

Answers travel-time queries between cities drawn on a text map. Each query is
answered either with the length of the shortest walk along the roads of the
map, or with the time of the fastest chain of flights when that is quicker.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cityroutes < input.txt
```

The program reads everything from standard input and writes one line per query
to standard output. It takes no options besides `--help`.

### Input format

```
W H
<H lines: the map, W characters each>
F
<F lines: ORIGIN DESTINATION TIME>
Q
<Q lines: ORIGIN DESTINATION TYPE>
```

Map rows shorter than `W` are padded with `.`, longer ones are cut to `W`.

Map characters:

- `*` a city
- `#` a road cell
- `.` empty, impassable ground
- any other character is part of a city name. A name is a run of such
  characters on one row, written next to its city; the cells around a city are
  searched in this order: the four diagonals (above-left, below-left,
  above-right, below-right), then above, left, right, below.

Roads and cities connect horizontally and vertically; every step costs 1.

Flights are one-way. When the same route is listed more than once, the shorter
time is kept. A time of `0` means "no flight", so a later zero-time line for a
route removes it.

### Answers

- If origin and destination are the same, the answer is `0`.
- Otherwise the road distance is the number of steps on the shortest walk, or
  `-1` when the destination cannot be reached by road.
- If flights were given and a flight route exists, its time is the answer when
  the road distance is below 1 or greater than the (non-zero) flight time.
- Otherwise the road distance is the answer.

With `TYPE` equal to `1`, the answer is followed on the same line by the names
of the cities passed on the way: for a flight route, the cities landed in
before the destination; for a road walk, the cities on the path other than the
origin and destination.

### Example

```
10 3
A*#####*B.
..........
..........
1
A B 2
2
A B 0
B A 1
```

prints

```
2
6
```

## Library use

```python
from cityroutes.grid import CityMap
from cityroutes.roads import RoadGrid
from cityroutes.flights import FlightNetwork
from cityroutes.cli import run

city_map = CityMap(["A*##*B"])
roads = RoadGrid(city_map.passable())
path = roads.find_path(city_map.coordinates("A"), city_map.coordinates("B"))
# [(0, 1), (0, 2), (0, 3), (0, 4)]

network = FlightNetwork()
network.load(["A B 2"])
route = network.fastest("A", "B")
# Route(time=2, stops=['B'])

answers = run(["6 1", "A*##*B", "0", "1", "A B 0"])
# ['3']
```

Modules:

- `cityroutes.text` – `to_int` and `parse_triple` for the line format.
- `cityroutes.grid` – `CityMap`: reads the character map, finds cities and
  their names (`cities`, `coordinates`, `name_at`, `is_city`, `is_letter`,
  `name_position`, `read_name`) and gives the `passable()` grid (2 for cities,
  1 for roads, 0 otherwise).
- `cityroutes.roads` – `RoadGrid`: breadth-first `find_path(start, end)`,
  returning the cells of a shortest path or `[]` when there is none.
- `cityroutes.flights` – `FlightNetwork`: `add_city`, `add_flight`, `load`,
  `city_name` and `fastest(origin, destination)`, which returns a `Route` of
  total time and stops, or `None`.
- `cityroutes.cli` – `run(lines)` answers a whole input; `main()` is the
  command.

## Limitations

- Input is not validated: numbers are read digit by digit without checks, and
  a city name that is not on the map is placed at cell `(0, 0)`.
- Queries are answered from one input read in full; there is no interactive
  mode and nothing is stored between runs.