import io

import pytest

from dsakit.routes_data import CITIES, Connection, TransportMode, connections
from dsakit.travel import (
    Criterion,
    Journey,
    TravelGraph,
    build_graph,
    format_journey,
    main,
    parse_criteria,
)

T = TransportMode.TRAIN
F = TransportMode.FLIGHT


def _triangle() -> TravelGraph:
    # A-B-C is short but slow and expensive; A-C is long, cheap and fast.
    return TravelGraph(
        cities=("A", "B", "C", "D"),
        connections=[
            Connection(0, 1, 10, 100, 600, T),
            Connection(1, 2, 10, 100, 600, T),
            Connection(0, 2, 100, 50, 60, F),
        ],
    )


def _sum_matches(journey: Journey) -> bool:
    return (
        journey.distance == sum(s.distance for s in journey.segments)
        and journey.cost == sum(s.cost for s in journey.segments)
        and journey.time == sum(s.time for s in journey.segments)
    )


def test_city_index_ignores_case():
    graph = build_graph()
    assert graph.city_index("dElHi") == 0
    assert graph.city_index("PANAJI") == len(CITIES) - 1


def test_city_index_unknown_raises():
    with pytest.raises(ValueError):
        build_graph().city_index("Nowhere")


def test_add_connection_is_bidirectional():
    graph = _triangle()
    back = [e for e in graph.neighbours(1) if e.destination == 0]
    assert len(back) == 1
    assert back[0].origin == 1
    assert back[0].distance == 10


def test_neighbours_most_recent_first():
    graph = _triangle()
    assert [e.destination for e in graph.neighbours(0)] == [2, 1]


def test_full_graph_has_every_connection_twice():
    graph = build_graph()
    total = sum(len(graph.neighbours(city)) for city in range(len(CITIES)))
    assert total == 2 * len(connections())


def test_out_of_range_city_raises():
    with pytest.raises(IndexError):
        _triangle().neighbours(9)


def test_optimal_by_distance_takes_short_route():
    journey = _triangle().find_optimal_path(0, 2, [Criterion.DISTANCE])
    assert journey.path == ("A", "B", "C")
    assert _sum_matches(journey)


def test_optimal_by_time_takes_direct_route():
    journey = _triangle().find_optimal_path(0, 2, [Criterion.TIME])
    assert journey.path == ("A", "C")
    assert journey.time == 60
    assert journey.criteria == (Criterion.TIME,)


def test_optimal_by_cost_takes_direct_route():
    journey = _triangle().find_optimal_path(0, 2, [Criterion.COST])
    assert journey.path == ("A", "C")
    assert journey.cost == 50


def test_optimal_unreachable_returns_none():
    assert _triangle().find_optimal_path(0, 3, [Criterion.DISTANCE]) is None


def test_optimal_same_city():
    journey = _triangle().find_optimal_path(1, 1, [Criterion.COST])
    assert journey.path == ("B",)
    assert journey.distance == 0
    assert journey.segments == ()


def test_optimal_requires_criteria():
    with pytest.raises(ValueError):
        _triangle().find_optimal_path(0, 2, [])


def test_real_graph_delhi_to_jaipur():
    graph = build_graph()
    journey = graph.find_optimal_path(0, 6, [Criterion.DISTANCE])
    assert journey.path == ("Delhi", "Jaipur")
    assert journey.distance == 280


@pytest.mark.parametrize("criteria", [[c] for c in Criterion] + [list(Criterion)])
def test_real_graph_paths_are_connected(criteria):
    graph = build_graph()
    journey = graph.find_optimal_path(0, len(CITIES) - 1, criteria)
    assert journey.start == "Delhi"
    assert journey.end == "Panaji"
    assert len(journey.segments) == len(journey.path) - 1


def test_budget_limits_route():
    graph = _triangle()
    cheap = graph.find_route_within_budget(0, 2, 100)
    assert cheap.path == ("A", "C")
    rich = graph.find_route_within_budget(0, 2, 1000)
    assert rich.path == ("A", "B", "C")
    assert rich.budget == 1000
    assert _sum_matches(rich)


def test_budget_too_small_returns_none():
    assert _triangle().find_route_within_budget(0, 2, 10) is None


def test_budget_must_be_positive():
    with pytest.raises(ValueError):
        _triangle().find_route_within_budget(0, 2, 0)


def test_real_graph_budget_boundary():
    graph = build_graph()
    assert graph.find_route_within_budget(0, 6, 500).path == ("Delhi", "Jaipur")
    assert graph.find_route_within_budget(0, 6, 499) is None


def test_segments_reject_unconnected_cities():
    with pytest.raises(ValueError):
        _triangle().segments([0, 3])


def test_segments_follow_path_direction():
    edges = _triangle().segments([2, 1, 0])
    assert [(e.origin, e.destination) for e in edges] == [(2, 1), (1, 0)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 3", [Criterion.DISTANCE, Criterion.TIME]),
        ("0 4 2", [Criterion.COST]),
        ("2\n", [Criterion.COST]),
        ("3  1", [Criterion.TIME, Criterion.DISTANCE]),
        ("1 1 1 1", [Criterion.DISTANCE] * 3),
    ],
)
def test_parse_criteria(text, expected):
    assert parse_criteria(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "4 5 0"])
def test_parse_criteria_rejects_empty_selection(text):
    with pytest.raises(ValueError):
        parse_criteria(text)


def test_format_optimal_journey():
    journey = _triangle().find_optimal_path(0, 2, [Criterion.DISTANCE, Criterion.COST])
    text = format_journey(journey)
    assert "OPTIMAL ROUTE FINDER" in text
    assert "Search Criteria: DISTANCE + COST" in text
    assert "Route: A -> B -> C" in text
    assert " A to B: Train (10.0 hrs, 10 km, Rs.100)" in text
    assert "Verified Totals:" in text


def test_format_time_in_hours_and_minutes():
    graph = TravelGraph(("X", "Y"), [Connection(0, 1, 5, 7, 125, F)])
    text = format_journey(graph.find_optimal_path(0, 1, [Criterion.TIME]))
    assert "Total Time: 2 hrs 5 mins" in text


def test_format_budget_journey():
    journey = _triangle().find_route_within_budget(0, 2, 100)
    text = format_journey(journey)
    assert "BUDGET ROUTE FINDER (MAX Rs.100)" in text
    assert "Shortest Route Option\nRoute: A -> C" in text
    assert "Transport Details:" not in text


def _run(monkeypatch, capsys, script):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    code = main()
    return code, capsys.readouterr().out


def test_main_lists_cities_and_exits(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "3\n4\n")
    assert code == 0
    assert " 1. Delhi" in out
    assert "35. Panaji" in out
    assert "Thank you for using Travel Planner!" in out


def test_main_finds_route(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\ndelhi\njaipur\n1\n4\n")
    assert code == 0
    assert "Route: Delhi -> Jaipur" in out


def test_main_rejects_unknown_city(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nNowhere\nDelhi\n4\n")
    assert "Invalid city name! Please try again." in out


def test_main_budget_route_not_found(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\nDelhi\nJaipur\n499\n4\n")
    assert "No routes found within Rs.499 budget" in out


def test_main_invalid_choice_and_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "9\n")
    assert code == 0
    assert "Invalid choice. Please try again." in out