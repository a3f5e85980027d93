"""
Presentation order for itineraries
"""
from typing import Iterable, List

from dataset.models import Itinerary


def itinerary_rank_key(itinerary: Itinerary):
    """Fewer stops first, then shorter total duration, then cheaper."""
    return (itinerary.stops, itinerary.total_duration, itinerary.total_price)


def rank_itineraries(itineraries: Iterable[Itinerary]) -> List[Itinerary]:
    return sorted(itineraries, key=itinerary_rank_key)
