"""
Application services
"""

from .search_service import FlightSearchService, UnknownAirportError, departure_window_utc

__all__ = [
    'FlightSearchService',
    'UnknownAirportError',
    'departure_window_utc'
]
