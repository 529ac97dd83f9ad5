"""Distance vector routing: build a routing table for every router from a cost matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

MAX_ROUTERS = 20


@dataclass(frozen=True)
class Route:
    """One routing-table entry: the next hop (0-based) and the distance to the target."""

    via: int
    distance: int


def _validated(costs: Sequence[Sequence[int]]) -> list[list[int]]:
    matrix = [list(row) for row in costs]
    size = len(matrix)
    if size > MAX_ROUTERS:
        raise ValueError(f"at most {MAX_ROUTERS} routers are supported, got {size}")
    for index, row in enumerate(matrix):
        if len(row) != size:
            raise ValueError(f"cost matrix must be square: row {index} has {len(row)} entries, expected {size}")
        if any(cost < 0 for cost in row):
            raise ValueError(f"costs must not be negative (row {index})")
        row[index] = 0
    return matrix


def distance_vector(costs: Sequence[Sequence[int]]) -> list[list[Route]]:
    """Exchange distance vectors until they settle and return each router's table.

    The distance from a router to itself is always 0, whatever the matrix holds.
    """
    matrix = _validated(costs)
    size = len(matrix)
    dist = [row[:] for row in matrix]
    via = [list(range(size)) for _ in range(size)]

    changed = True
    while changed:
        changed = False
        for i, (own_costs, own_dist, own_via) in enumerate(zip(matrix, dist, via)):
            for j in range(size):
                for k, neighbour_dist in enumerate(dist):
                    if own_dist[j] > own_costs[k] + neighbour_dist[j]:
                        own_dist[j] = own_dist[k] + neighbour_dist[j]
                        own_via[j] = k
                        changed = True

    return [
        [Route(via=hop, distance=distance) for hop, distance in zip(hops, distances)]
        for hops, distances in zip(via, dist)
    ]


def format_tables(tables: Sequence[Sequence[Route]]) -> str:
    """Render routing tables with 1-based router numbers."""
    parts = []
    for router, table in enumerate(tables, start=1):
        parts.append(f"\n\nRouting Table For Router {router}\n")
        parts.extend(
            f"To Node {target} via {route.via + 1}|Distance: {route.distance}\n"
            for target, route in enumerate(table, start=1)
        )
    return "".join(parts)


def _read_int(prompt: str) -> int:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"expected an integer, got {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read a cost matrix interactively and print every router's table."""
    parser = argparse.ArgumentParser(description="Distance vector routing tables from a cost matrix.")
    parser.parse_args(argv)
    try:
        nodes = _read_int("Enter no.of routers: ")
        print("\nEnter The Cost Matrix")
        costs = [[_read_int(f"costmat[{i}][{j}]-") for j in range(nodes)] for i in range(nodes)]
        tables = distance_vector(costs)
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_tables(tables), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())