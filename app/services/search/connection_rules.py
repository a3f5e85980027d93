"""
Layover rules for connecting two consecutive flight legs
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

from dataset.models import Flight


def is_domestic(flight: Flight) -> bool:
    """
    A leg is domestic when its origin and destination share a country
    (compared case-insensitively).
    """
    origin_country = flight.origin.country
    destination_country = flight.destination.country
    return (
        origin_country is not None
        and destination_country is not None
        and origin_country.casefold() == destination_country.casefold()
    )


def per_connection_min_layover(first: Flight, second: Flight, rules: 'ConnectionRules') -> timedelta:
    """
    Domestic minimum only when both legs of the connection are domestic;
    a single international leg makes the whole connection international.
    """
    if rules.classifier(first) and rules.classifier(second):
        return rules.min_domestic_layover
    return rules.min_international_layover


@dataclass(frozen=True)
class ConnectionRules:
    """
    Connection policy applied at every hop of an itinerary.

    The domestic classifier and the minimum-layover policy are plain
    callables so alternative modes (e.g. domestic-only trips) can be
    plugged in without touching the search algorithm.

    Attributes:
        min_domestic_layover: Minimum gap when both legs are domestic.
        min_international_layover: Minimum gap when either leg is international.
        max_layover: Maximum gap for any connection.
        classifier: Flight -> True if the leg is domestic.
        min_layover_policy: (first, second, rules) -> required minimum gap.
    """

    min_domestic_layover: timedelta = timedelta(minutes=45)
    min_international_layover: timedelta = timedelta(minutes=90)
    max_layover: timedelta = timedelta(hours=6)
    classifier: Callable[[Flight], bool] = is_domestic
    min_layover_policy: Callable[[Flight, Flight, 'ConnectionRules'], timedelta] = per_connection_min_layover

    def __post_init__(self) -> None:
        for name in ('min_domestic_layover', 'min_international_layover', 'max_layover'):
            if getattr(self, name) < timedelta(0):
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.max_layover < max(self.min_domestic_layover, self.min_international_layover):
            raise ValueError(
                f"max_layover ({self.max_layover}) must not be shorter than the minimum layovers"
            )

    @property
    def shortest_min_layover(self) -> timedelta:
        """Loosest lower bound on any connection, used only for pruning."""
        return min(self.min_domestic_layover, self.min_international_layover)

    def min_layover(self, first: Flight, second: Flight) -> timedelta:
        return self.min_layover_policy(first, second, self)

    def is_valid_connection(self, first: Flight, second: Flight) -> bool:
        """
        Check whether 'second' can follow 'first' at the same airport.

        Layovers are measured between the local times at the connection
        airport.
        """
        if first.destination.code != second.origin.code:
            return False

        arrival_local = first.arrival_local
        departure_local = second.departure_local

        # Cannot depart before or exactly at the arrival time
        if departure_local <= arrival_local:
            return False

        layover = departure_local - arrival_local
        if layover < self.min_layover(first, second):
            return False

        if layover > self.max_layover:
            return False

        return True


DEFAULT_CONNECTION_RULES = ConnectionRules()
