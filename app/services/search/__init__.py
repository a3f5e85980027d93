from .algorithm import FlightSearchAlgorithm, DEFAULT_MAX_STOPS
from .connection_rules import (
    ConnectionRules,
    DEFAULT_CONNECTION_RULES,
    is_domestic,
    per_connection_min_layover
)
from .direct_search import DirectFlightSearch
from .one_stop_search import OneStopFlightSearch
from .two_stop_search import TwoStopFlightSearch
from .itinerary_builder import ItineraryBuilder
from .path_finder import enumerate_airport_paths
from .ranking import rank_itineraries, itinerary_rank_key
from .helpers import (
    find_first_departure_not_before,
    is_within_departure_window,
    first_legs_in_window,
    feasible_next_legs,
    extend_with_connections
)

__all__ = [
    'FlightSearchAlgorithm',
    'DEFAULT_MAX_STOPS',
    'ConnectionRules',
    'DEFAULT_CONNECTION_RULES',
    'is_domestic',
    'per_connection_min_layover',
    'DirectFlightSearch',
    'OneStopFlightSearch',
    'TwoStopFlightSearch',
    'ItineraryBuilder',
    'enumerate_airport_paths',
    'rank_itineraries',
    'itinerary_rank_key',
    'find_first_departure_not_before',
    'is_within_departure_window',
    'first_legs_in_window',
    'feasible_next_legs',
    'extend_with_connections'
]
