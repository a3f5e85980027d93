"""
Domain models for the in-memory flight network
Airports, flights and itineraries are immutable values built once at load time
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import NamedTuple, Tuple

import pytz


def _require_utc_aware(value: datetime, name: str) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware, got naive {value!r}")
    return value.astimezone(pytz.utc)


def localize_wall_clock(naive: datetime, tz) -> datetime:
    """
    Attach a pytz zone to a naive local time.

    A time repeated by a DST fall-back takes the earlier (daylight) offset;
    a time skipped by a spring-forward is read with the standard offset,
    which lands it just after the gap.
    """
    try:
        return tz.localize(naive, is_dst=None)
    except pytz.AmbiguousTimeError:
        return tz.localize(naive, is_dst=True)
    except pytz.NonExistentTimeError:
        return tz.localize(naive, is_dst=False)


@dataclass(frozen=True)
class Airport:
    """
    Airport entity with IATA code, display data and IANA timezone
    """
    code: str
    name: str
    city: str
    country: str
    timezone: str

    def __post_init__(self):
        for attr in ('code', 'name', 'city', 'country', 'timezone'):
            if not getattr(self, attr):
                raise ValueError(f"Airport {attr} must not be empty")

    @property
    def tzinfo(self):
        """pytz timezone for local wall-clock conversions"""
        return pytz.timezone(self.timezone)

    def localize(self, naive: datetime) -> datetime:
        """Local wall-clock time at this airport as an aware datetime"""
        return localize_wall_clock(naive, self.tzinfo)

    def __repr__(self):
        return f"<Airport(code='{self.code}', city='{self.city}', country='{self.country}')>"


class RouteKey(NamedTuple):
    """
    Direct link between two airports, used as a lookup key into the route index
    """
    origin_code: str
    destination_code: str

    @classmethod
    def of(cls, flight: 'Flight') -> 'RouteKey':
        return cls(flight.origin.code, flight.destination.code)


@dataclass(frozen=True)
class Flight:
    """
    A single scheduled flight between two airports.

    Departure and arrival are stored as UTC instants; local times are derived
    on demand from the airports' timezones.
    """
    flight_number: str
    airline: str
    origin: Airport
    destination: Airport
    departure_time_utc: datetime
    arrival_time_utc: datetime
    price: Decimal
    aircraft: str

    def __post_init__(self):
        departure = _require_utc_aware(self.departure_time_utc, 'departure_time_utc')
        arrival = _require_utc_aware(self.arrival_time_utc, 'arrival_time_utc')
        if arrival <= departure:
            raise ValueError(
                f"Flight {self.flight_number}: arrival {arrival.isoformat()} "
                f"must be after departure {departure.isoformat()}"
            )
        price = self.price if isinstance(self.price, Decimal) else Decimal(str(self.price))
        if price < 0:
            raise ValueError(f"Flight {self.flight_number}: price must be >= 0, got {price}")

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'departure_time_utc', departure)
        object.__setattr__(self, 'arrival_time_utc', arrival)
        object.__setattr__(self, 'price', price)

    @property
    def route_key(self) -> RouteKey:
        return RouteKey.of(self)

    @property
    def duration(self) -> timedelta:
        return self.arrival_time_utc - self.departure_time_utc

    @property
    def departure_local(self) -> datetime:
        """Departure time in the origin airport's local timezone."""
        return self.departure_time_utc.astimezone(self.origin.tzinfo)

    @property
    def arrival_local(self) -> datetime:
        """Arrival time in the destination airport's local timezone."""
        return self.arrival_time_utc.astimezone(self.destination.tzinfo)

    def __repr__(self):
        return (
            f"<Flight(number='{self.flight_number}', "
            f"route='{self.origin.code}->{self.destination.code}', "
            f"departure_utc='{self.departure_time_utc.isoformat()}')>"
        )


@dataclass(frozen=True)
class Itinerary:
    """
    One or more chained flight legs from an origin to a final destination.

    An itinerary always has at least one leg; "no possible journey" is an
    empty list of itineraries, never an empty itinerary.
    """
    legs: Tuple[Flight, ...]

    def __post_init__(self):
        legs = tuple(self.legs)
        if not legs:
            raise ValueError("Itinerary must contain at least one flight leg")
        for previous, following in zip(legs, legs[1:]):
            if previous.destination.code != following.origin.code:
                raise ValueError(
                    f"Legs {previous.flight_number} and {following.flight_number} are not "
                    f"connected: {previous.destination.code} != {following.origin.code}"
                )
        object.__setattr__(self, 'legs', legs)

    @classmethod
    def of_single_leg(cls, flight: Flight) -> 'Itinerary':
        return cls((flight,))

    @classmethod
    def of_legs(cls, *flights: Flight) -> 'Itinerary':
        return cls(tuple(flights))

    @property
    def origin(self) -> Airport:
        return self.legs[0].origin

    @property
    def destination(self) -> Airport:
        return self.legs[-1].destination

    @property
    def stops(self) -> int:
        """Number of intermediate airports (legs - 1)."""
        return len(self.legs) - 1

    @property
    def total_price(self) -> Decimal:
        return sum((leg.price for leg in self.legs), Decimal('0'))

    @property
    def total_duration(self) -> timedelta:
        """First departure to last arrival, measured between UTC instants."""
        return self.legs[-1].arrival_time_utc - self.legs[0].departure_time_utc

    def __len__(self):
        return len(self.legs)

    def __repr__(self):
        path = '->'.join([self.legs[0].origin.code] + [leg.destination.code for leg in self.legs])
        numbers = ','.join(leg.flight_number for leg in self.legs)
        return f"<Itinerary(path='{path}', flights='{numbers}')>"
