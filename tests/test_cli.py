import io
import sys

from cityroutes.cli import main, run

MAP = ["7 3", "A.....B", "*##*##*", "...C..."]
SPLIT_MAP = ["5 3", "A...B", "*...*", "....."]


def ask(grid, flights, queries):
    return run([*grid, str(len(flights)), *flights, str(len(queries)), *queries])


def test_same_city_is_zero():
    assert ask(MAP, [], ["A A 1"]) == ["0"]


def test_detailed_road_lists_passed_cities():
    assert ask(MAP, [], ["A B 1"]) == ["6 C"]


def test_plain_road_is_first_token_of_detailed():
    plain, detailed = ask(MAP, [], ["A B 0", "A B 1"])
    assert detailed.split()[0] == plain


def test_neighbouring_cities_have_no_stops():
    plain, detailed = ask(MAP, [], ["C A 0", "C A 1"])
    assert detailed == plain
    assert len(detailed.split()) == 1


def test_faster_flight_wins():
    assert ask(MAP, ["A B 2"], ["A B 0", "A B 1"]) == ["2", "2"]


def test_flight_with_stop():
    assert ask(MAP, ["A C 1", "C B 1"], ["A B 1"]) == ["2 C"]


def test_slow_flight_is_ignored():
    queries = ["A B 0", "A B 1", "B C 1"]
    assert ask(MAP, ["A B 10"], queries) == ask(MAP, [], queries)


def test_flight_elsewhere_does_not_change_roads():
    queries = ["A B 0", "B A 1"]
    assert ask(MAP, ["A C 1"], queries) == ask(MAP, [], queries)


def test_unreachable_by_road():
    assert ask(SPLIT_MAP, [], ["A B 0"]) == ["-1"]


def test_flight_used_when_road_missing():
    assert ask(SPLIT_MAP, ["A B 9"], ["A B 0"]) == ["9"]


def test_missing_query_lines_read_as_empty():
    lines = [*MAP, "0", "2", "A B 0"]
    first, second = run(lines)
    assert first == ask(MAP, [], ["A B 0"])[0]
    assert second == "0"


def test_trailing_newlines_are_ignored():
    lines = [*MAP, "0", "1", "A B 1"]
    assert run(line + "\n" for line in lines) == run(lines)


def test_main_prints_answers(monkeypatch, capsys):
    lines = [*MAP, "1", "A B 2", "2", "A B 1", "C A 0"]
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "\n".join(run(lines)) + "\n"