"""
API models package
"""

from .schemas import (
    SearchResponse,
    FlightSegment,
    Layover,
    ItineraryResponse,
    SearchMetadata,
    AirportSummary,
    ErrorResponse,
    SortOption
)

__all__ = [
    'SearchResponse',
    'FlightSegment',
    'Layover',
    'ItineraryResponse',
    'SearchMetadata',
    'AirportSummary',
    'ErrorResponse',
    'SortOption'
]
