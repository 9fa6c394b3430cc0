"""Travel planner: multi-criteria and budget-limited route search over the city network."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from itertools import pairwise

from dsakit.routes_data import CITIES, Connection, connections

MAX_CRITERIA = 3
_RULE = "=" * 40
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Criterion(Enum):
    """What a route search minimises."""

    DISTANCE = 0
    COST = 1
    TIME = 2


@dataclass(frozen=True)
class Journey:
    """A route found by a search.

    ``distance``, ``cost`` and ``time`` are the totals the search accumulated;
    ``segments`` are the connections listed for each hop of ``path``.
    """

    path: tuple[str, ...]
    distance: int
    cost: int
    time: int
    segments: tuple[Connection, ...]
    criteria: tuple[Criterion, ...] = ()
    budget: int | None = None

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]


def _scaled_score(criteria: Sequence[Criterion], distance: int, cost: int, time: int) -> int:
    """Combined score times ten: distance counts fully, cost and time a tenth each."""
    score = 0
    for criterion in criteria:
        if criterion is Criterion.DISTANCE:
            score += distance * 10
        elif criterion is Criterion.COST:
            score += cost
        else:
            score += time
    return score


def _closest(values: Sequence[int | None], visited: Sequence[bool]) -> int | None:
    """Index of the smallest known value among unvisited nodes; lowest index on ties."""
    best: int | None = None
    for index, (value, done) in enumerate(zip(values, visited)):
        if done or value is None:
            continue
        if best is None or value < values[best]:  # type: ignore[operator]
            best = index
    return best


def _trace(previous: Sequence[int | None], end: int) -> list[int]:
    path: list[int] = []
    node: int | None = end
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return path


class TravelGraph:
    """Undirected multigraph of cities joined by transport connections."""

    def __init__(
        self, cities: Iterable[str] = CITIES, connections: Iterable[Connection] = ()
    ) -> None:
        self.cities: tuple[str, ...] = tuple(cities)
        self._adjacency: list[list[Connection]] = [[] for _ in self.cities]
        for connection in connections:
            self.add_connection(connection)

    def _check_city(self, city: int) -> None:
        if not 0 <= city < len(self.cities):
            raise IndexError(f"city index {city} out of range 0..{len(self.cities) - 1}")

    def add_connection(self, connection: Connection) -> None:
        """Add ``connection`` in both directions."""
        self._check_city(connection.origin)
        self._check_city(connection.destination)
        self._adjacency[connection.origin].append(connection)
        self._adjacency[connection.destination].append(
            replace(connection, origin=connection.destination, destination=connection.origin)
        )

    def neighbours(self, city: int) -> list[Connection]:
        """Connections leaving ``city``, most recently added first."""
        self._check_city(city)
        return list(reversed(self._adjacency[city]))

    def city_index(self, name: str) -> int:
        """Index of the city called ``name``, ignoring case."""
        wanted = name.lower()
        for index, city in enumerate(self.cities):
            if city.lower() == wanted:
                return index
        raise ValueError(f"Invalid city name: {name!r}")

    def find_optimal_path(
        self, start: int, end: int, criteria: Iterable[Criterion]
    ) -> Journey | None:
        """Route minimising the combined ``criteria`` score, or None if unreachable."""
        chosen = tuple(criteria)
        if not chosen:
            raise ValueError("Invalid selection. Please choose at least one criteria.")
        self._check_city(start)
        self._check_city(end)
        count = len(self.cities)
        score: list[int | None] = [None] * count
        totals: list[tuple[int, int, int] | None] = [None] * count
        previous: list[int | None] = [None] * count
        visited = [False] * count
        score[start] = 0
        totals[start] = (0, 0, 0)

        for _ in range(count):
            u = _closest(score, visited)
            if u is None or u == end:
                break
            visited[u] = True
            distance, cost, time = totals[u]  # type: ignore[misc]
            for edge in self.neighbours(u):
                v = edge.destination
                new = (distance + edge.distance, cost + edge.cost, time + edge.time)
                new_score = _scaled_score(chosen, *new)
                if not visited[v] and (score[v] is None or new_score < score[v]):  # type: ignore[operator]
                    score[v] = new_score
                    totals[v] = new
                    previous[v] = u

        if totals[end] is None:
            return None
        return self._journey(_trace(previous, end), totals[end], criteria=chosen)  # type: ignore[arg-type]

    def find_route_within_budget(self, start: int, end: int, max_budget: int) -> Journey | None:
        """Shortest-distance route whose cost stays within ``max_budget``, or None."""
        if max_budget <= 0:
            raise ValueError("Budget must be positive amount")
        self._check_city(start)
        self._check_city(end)
        count = len(self.cities)
        distances: list[int | None] = [None] * count
        totals: list[tuple[int, int, int] | None] = [None] * count
        previous: list[int | None] = [None] * count
        visited = [False] * count
        distances[start] = 0
        totals[start] = (0, 0, 0)

        for _ in range(count - 1):
            u = _closest(distances, visited)
            if u is None or u == end:
                break
            visited[u] = True
            distance, cost, time = totals[u]  # type: ignore[misc]
            for edge in self.neighbours(u):
                v = edge.destination
                if visited[v] or cost + edge.cost > max_budget:
                    continue
                new_distance = distance + edge.distance
                if distances[v] is None or new_distance < distances[v]:  # type: ignore[operator]
                    distances[v] = new_distance
                    totals[v] = (new_distance, cost + edge.cost, time + edge.time)
                    previous[v] = u

        if totals[end] is None:
            return None
        return self._journey(_trace(previous, end), totals[end], budget=max_budget)  # type: ignore[arg-type]

    def segments(self, path: Sequence[int]) -> list[Connection]:
        """For each hop of ``path``, the first listed connection between its two cities."""
        result: list[Connection] = []
        for here, there in pairwise(path):
            edge = next((e for e in self.neighbours(here) if e.destination == there), None)
            if edge is None:
                raise ValueError(
                    f"{self.cities[here]} and {self.cities[there]} are not connected"
                )
            result.append(edge)
        return result

    def _journey(
        self,
        path: list[int],
        totals: tuple[int, int, int],
        criteria: tuple[Criterion, ...] = (),
        budget: int | None = None,
    ) -> Journey:
        distance, cost, time = totals
        return Journey(
            path=tuple(self.cities[city] for city in path),
            distance=distance,
            cost=cost,
            time=time,
            segments=tuple(self.segments(path)),
            criteria=criteria,
            budget=budget,
        )


def build_graph() -> TravelGraph:
    """Graph of every city and connection in the network."""
    return TravelGraph(CITIES, connections())


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_criteria(text: str) -> list[Criterion]:
    """Read up to three space-separated criterion numbers (1-3), skipping invalid ones."""
    chosen: list[Criterion] = []
    for token in text.split(" "):
        if len(chosen) == MAX_CRITERIA:
            break
        if not token:
            continue
        number = _leading_int(token) or 0
        if 1 <= number <= 3:
            chosen.append(Criterion(number - 1))
    if not chosen:
        raise ValueError("Invalid selection. Please choose at least one criteria.")
    return chosen


def _totals_lines(distance: int, cost: int, time: int) -> list[str]:
    return [
        f"Total Distance: {distance} km",
        f"Total Cost: Rs.{cost}",
        f"Total Time: {time // 60} hrs {time % 60} mins",
    ]


def _budget_header(budget: int, start: str, end: str) -> list[str]:
    return [
        _RULE,
        f"       BUDGET ROUTE FINDER (MAX Rs.{budget})",
        f"From: {start}",
        f"To: {end}",
        _RULE,
    ]


def format_journey(journey: Journey) -> str:
    """Render a journey as the planner's route report."""
    route = ["Route: " + " -> ".join(journey.path)]
    route += _totals_lines(journey.distance, journey.cost, journey.time)
    if journey.budget is not None:
        lines = _budget_header(journey.budget, journey.start, journey.end)
        lines.append("Shortest Route Option")
        lines += route
        return "\n".join(lines)

    lines = [
        _RULE,
        "          OPTIMAL ROUTE FINDER",
        _RULE,
        "Search Criteria: " + " + ".join(c.name for c in journey.criteria),
        f"From: {journey.start}",
        f"To: {journey.end}",
        _RULE,
    ]
    lines += route
    lines += ["", "Transport Details:"]
    for (here, there), edge in zip(pairwise(journey.path), journey.segments):
        lines.append(
            f" {here} to {there}: {edge.mode} "
            f"({edge.time / 60:.1f} hrs, {edge.distance} km, Rs.{edge.cost})"
        )
    lines += ["", "Verified Totals:"]
    lines += _totals_lines(
        sum(e.distance for e in journey.segments),
        sum(e.cost for e in journey.segments),
        sum(e.time for e in journey.segments),
    )
    return "\n".join(lines)


def _read_cities(graph: TravelGraph) -> tuple[str, str]:
    start = input("\nEnter starting city: ")
    end = input("Enter destination city: ")
    return start, end


def _resolve(graph: TravelGraph, start: str, end: str) -> tuple[int, int] | None:
    try:
        return graph.city_index(start), graph.city_index(end)
    except ValueError:
        print("Invalid city name! Please try again.")
        return None


def _optimal_route(graph: TravelGraph) -> None:
    start, end = _read_cities(graph)
    endpoints = _resolve(graph, start, end)
    if endpoints is None:
        return
    src, dest = endpoints
    print(f"\nSelect up to {MAX_CRITERIA} criteria (enter numbers separated by spaces):")
    print("1. Distance (km)")
    print("2. Cost (Rs)")
    print("3. Time (minutes)")
    try:
        criteria = parse_criteria(input("Enter your choices: "))
    except ValueError as error:
        print(error)
        return
    print(f"\nSearching for optimal route from {graph.cities[src]} to {graph.cities[dest]}...")
    journey = graph.find_optimal_path(src, dest, criteria)
    if journey is None:
        print(f"\nNo route found between {graph.cities[src]} and {graph.cities[dest]}")
    else:
        print("\n" + format_journey(journey))


def _budget_route(graph: TravelGraph) -> None:
    start, end = _read_cities(graph)
    budget = _leading_int(input("Enter your maximum budget (Rs.): ")) or 0
    endpoints = _resolve(graph, start, end)
    if endpoints is None:
        return
    if budget <= 0:
        print("Budget must be positive amount")
        return
    src, dest = endpoints
    print(f"\nSearching for routes under  Rs.{budget}...")
    journey = graph.find_route_within_budget(src, dest, budget)
    if journey is None:
        print("\n" + "\n".join(_budget_header(budget, graph.cities[src], graph.cities[dest])))
        print(f"No routes found within Rs.{budget} budget")
    else:
        print("\n" + format_journey(journey))


def _view_cities(graph: TravelGraph) -> None:
    print("\nAvailable Cities:")
    for number, city in enumerate(graph.cities, start=1):
        print(f"{number:2d}. {city}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive travel planner on standard input and output."""
    graph = build_graph()
    print("\n       TRAVEL PLANNER APPLICATION")
    print("\nKey Features:")
    print("- Find routes by multiple criteria")
    print("- Search within specific budget")
    print("- Multiple transportation options")
    print("- Clear route details with costs")
    actions = {1: _optimal_route, 2: _budget_route, 3: _view_cities}
    try:
        while True:
            print("\n\nMain Menu:")
            print("1. Find optimal route by criteria")
            print("2. Find routes within budget")
            print("3. View available cities")
            print("4. Exit")
            choice = _leading_int(input("Enter your choice: "))
            if choice == 4:
                print("\nThank you for using Travel Planner!")
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print("Invalid choice. Please try again.")
            else:
                action(graph)
    except EOFError:
        return 0