"""
Read-side index over the flight network
Built once at startup from the full list of flights and never mutated afterwards
"""

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set, Tuple

from dataset.models import Flight, RouteKey

logger = logging.getLogger(__name__)

_NO_FLIGHTS: Tuple[Flight, ...] = ()
_NO_NEIGHBORS: FrozenSet[str] = frozenset()


class FlightNetworkIndex:
    """
    Groups flights by (origin, destination) route, sorted by departure time,
    and keeps a route adjacency graph so airport paths like O->X->Y->D can be
    explored without touching individual flights.

    The index assumes flights were already validated by ingestion; it
    performs no filtering of its own.
    """

    def __init__(self, flights: Iterable[Flight]):
        flights = list(flights)
        self._flight_count = len(flights)
        self._flights_by_route = self._index_flights_by_route(flights)
        self._route_adjacency = self._build_route_adjacency(flights)

        logger.debug(
            "Indexed %d flights over %d routes from %d origins",
            self._flight_count, len(self._flights_by_route), len(self._route_adjacency)
        )

    @staticmethod
    def _index_flights_by_route(
        flights: List[Flight]
    ) -> Mapping[RouteKey, Tuple[Flight, ...]]:
        grouped: Dict[RouteKey, List[Flight]] = defaultdict(list)
        for flight in flights:
            grouped[RouteKey.of(flight)].append(flight)

        return MappingProxyType({
            key: tuple(sorted(route_flights, key=lambda f: f.departure_time_utc))
            for key, route_flights in grouped.items()
        })

    @staticmethod
    def _build_route_adjacency(
        flights: List[Flight]
    ) -> Mapping[str, FrozenSet[str]]:
        grouped: Dict[str, Set[str]] = defaultdict(set)
        for flight in flights:
            grouped[flight.origin.code].add(flight.destination.code)

        return MappingProxyType({
            origin: frozenset(destinations)
            for origin, destinations in grouped.items()
        })

    def find_by_route(self, origin_code: str, destination_code: str) -> Tuple[Flight, ...]:
        """
        Return all flights for the given route sorted by departure_time_utc
        ascending, or an empty tuple if there is no such route.
        """
        return self._flights_by_route.get(RouteKey(origin_code, destination_code), _NO_FLIGHTS)

    def neighbors(self, origin_code: str) -> FrozenSet[str]:
        """Destination codes reachable from origin_code by a direct flight."""
        return self._route_adjacency.get(origin_code, _NO_NEIGHBORS)

    @property
    def route_adjacency(self) -> Mapping[str, FrozenSet[str]]:
        """Read-only view: origin code -> destination codes with a direct flight."""
        return self._route_adjacency

    @property
    def flights_by_route(self) -> Mapping[RouteKey, Tuple[Flight, ...]]:
        """Read-only view of the full route index."""
        return self._flights_by_route

    @property
    def routes(self) -> FrozenSet[RouteKey]:
        return frozenset(self._flights_by_route)

    def __len__(self):
        return self._flight_count

    def __repr__(self):
        return f"<FlightNetworkIndex(flights={self._flight_count}, routes={len(self._flights_by_route)})>"
