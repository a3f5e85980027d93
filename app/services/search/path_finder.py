"""
Airport-level path enumeration over the route adjacency graph
"""
from typing import FrozenSet, List, Mapping, Tuple

AirportPath = Tuple[str, ...]


def enumerate_airport_paths(
    origin: str,
    destination: str,
    max_stops: int,
    adjacency: Mapping[str, FrozenSet[str]]
) -> List[AirportPath]:
    """
    Find every simple airport path from origin to destination with at most
    max_stops intermediate airports (max_stops + 1 edges).

    Depth-first; an airport is never revisited within one path. Cost depends
    only on the branching factor of the route graph, not on how many flights
    each route has.

    Args:
        origin: Origin airport code
        destination: Destination airport code
        max_stops: Maximum number of intermediate airports
        adjacency: Origin code -> codes reachable by a direct flight

    Returns:
        Airport code tuples, each starting at origin and ending at destination
    """
    if max_stops < 0:
        raise ValueError(f"max_stops must be >= 0, got {max_stops}")

    paths: List[AirportPath] = []
    current_path = [origin]
    visited = {origin}

    def visit(current: str, remaining_legs: int) -> None:
        if current == destination:
            paths.append(tuple(current_path))
            return

        if remaining_legs == 0:
            return

        # Sorted for deterministic output across runs
        for next_code in sorted(adjacency.get(current, ())):
            if next_code in visited:
                continue
            current_path.append(next_code)
            visited.add(next_code)
            visit(next_code, remaining_legs - 1)
            visited.discard(next_code)
            current_path.pop()

    visit(origin, max_stops + 1)
    return paths
