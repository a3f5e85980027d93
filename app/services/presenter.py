"""
Mapping from domain itineraries to API response models
UTC instants are projected into each airport's local time only here
"""
from datetime import datetime
from typing import List, Optional, Sequence

from dataset.models import Flight, Itinerary
from app.models import FlightSegment, ItineraryResponse, Layover, SortOption


def _minutes(delta) -> int:
    return int(delta.total_seconds() // 60)


def format_local(moment: datetime) -> str:
    """ISO-8601 with offset, e.g. 2024-03-15T08:30:00-04:00"""
    return moment.isoformat(timespec='seconds')


def to_segment(flight: Flight) -> FlightSegment:
    return FlightSegment(
        flight_number=flight.flight_number,
        airline=flight.airline,
        origin_code=flight.origin.code,
        origin_city=flight.origin.city,
        destination_code=flight.destination.code,
        destination_city=flight.destination.city,
        departure_time_local=format_local(flight.departure_local),
        arrival_time_local=format_local(flight.arrival_local),
        aircraft=flight.aircraft,
        price=flight.price
    )


def compute_layovers(legs: Sequence[Flight]) -> List[Layover]:
    """
    Layover at each connection point, measured between the local times
    at the connection airport.
    """
    return [
        Layover(
            airport_code=current.destination.code,
            duration_minutes=_minutes(following.departure_local - current.arrival_local)
        )
        for current, following in zip(legs, legs[1:])
    ]


def to_itinerary_response(itinerary: Itinerary) -> ItineraryResponse:
    return ItineraryResponse(
        segments=[to_segment(leg) for leg in itinerary.legs],
        layovers=compute_layovers(itinerary.legs),
        stops=itinerary.stops,
        total_duration_minutes=_minutes(itinerary.total_duration),
        total_price=itinerary.total_price
    )


def apply_sort(itineraries: List[Itinerary], sort: Optional[SortOption]) -> List[Itinerary]:
    """
    Re-sort ranked itineraries on request; stable, so the ranking breaks ties.
    """
    if sort == SortOption.PRICE:
        return sorted(itineraries, key=lambda x: x.total_price)
    elif sort == SortOption.DURATION:
        return sorted(itineraries, key=lambda x: x.total_duration)
    elif sort == SortOption.DEPARTURE_TIME:
        return sorted(itineraries, key=lambda x: x.legs[0].departure_time_utc)
    return list(itineraries)
