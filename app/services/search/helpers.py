"""
Helper utilities for flight search operations
Shared by every hop of the direct, one-stop and two-stop builders
"""
from bisect import bisect_left
from datetime import datetime
from typing import Iterator, Sequence, Tuple

from dataset.models import Flight
from .connection_rules import ConnectionRules


def _departure(flight: Flight) -> datetime:
    return flight.departure_time_utc


def find_first_departure_not_before(flights: Sequence[Flight], threshold: datetime) -> int:
    """
    Binary search over flights sorted by departure_time_utc.

    Args:
        flights: Flights sorted ascending by departure_time_utc
        threshold: UTC instant to search for

    Returns:
        Index of the first flight departing at or after threshold, or -1 if none
    """
    index = bisect_left(flights, threshold, key=_departure)
    return index if index < len(flights) else -1


def is_within_departure_window(
    departure: datetime,
    window_start: datetime,
    window_end: datetime
) -> bool:
    """Half-open [window_start, window_end) check on a UTC instant."""
    return window_start <= departure < window_end


def first_legs_in_window(
    flights: Sequence[Flight],
    window_start: datetime,
    window_end: datetime
) -> Iterator[Flight]:
    """
    Flights of a sorted route whose departure falls inside the window.
    """
    start_index = find_first_departure_not_before(flights, window_start)
    if start_index < 0:
        return

    for i in range(start_index, len(flights)):
        flight = flights[i]
        if not is_within_departure_window(flight.departure_time_utc, window_start, window_end):
            break
        yield flight


def feasible_next_legs(
    current_leg: Flight,
    candidate_next_legs: Sequence[Flight],
    rules: ConnectionRules
) -> Iterator[Flight]:
    """
    Yield the legs of candidate_next_legs that current_leg can connect to.

    Assumes candidate_next_legs is sorted by departure_time_utc, which the
    network index guarantees. Only the slice between the earliest plausible
    departure and the maximum layover is scanned.
    """
    if not candidate_next_legs:
        return

    current_arrival = current_leg.arrival_time_utc

    # Loosest bound; the exact domestic/international minimum is enforced below
    earliest_next_departure = current_arrival + rules.shortest_min_layover

    start_index = find_first_departure_not_before(candidate_next_legs, earliest_next_departure)
    if start_index < 0:
        return

    for i in range(start_index, len(candidate_next_legs)):
        next_leg = candidate_next_legs[i]

        # Sorted by departure: every later candidate waits even longer
        if next_leg.departure_time_utc - current_arrival > rules.max_layover:
            break

        if rules.is_valid_connection(current_leg, next_leg):
            yield next_leg


def extend_with_connections(
    current_leg: Flight,
    candidate_next_legs: Sequence[Flight],
    rules: ConnectionRules,
    previous_legs: Tuple[Flight, ...] = ()
) -> Iterator[Tuple[Flight, ...]]:
    """
    Extend a partial itinerary ending in current_leg with every feasible
    continuation, yielding previous_legs + (current_leg, next_leg).
    """
    for next_leg in feasible_next_legs(current_leg, candidate_next_legs, rules):
        yield previous_legs + (current_leg, next_leg)
