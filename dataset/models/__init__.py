"""
Domain models package
"""

from .schema import (
    Airport,
    Flight,
    Itinerary,
    RouteKey,
    localize_wall_clock
)

__all__ = [
    'Airport',
    'Flight',
    'Itinerary',
    'RouteKey',
    'localize_wall_clock'
]
