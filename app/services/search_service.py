"""
Flight Search Service - Main entry point for flight searches
Resolves airports, turns a local travel date into a UTC departure window
and delegates the search itself to FlightSearchAlgorithm
"""
import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

import pytz

from dataset.ingestion import FlightNetwork
from dataset.models import Airport, Itinerary
from app.services.search.algorithm import FlightSearchAlgorithm, DEFAULT_MAX_STOPS
from app.services.search.connection_rules import ConnectionRules

logger = logging.getLogger(__name__)


class UnknownAirportError(ValueError):
    """Raised when a requested airport code is not in the loaded dataset."""

    def __init__(self, code: str, role: str):
        self.code = code
        self.role = role
        super().__init__(f"Unknown {role} airport: {code}")


def departure_window_utc(airport: Airport, travel_date: date) -> Tuple[datetime, datetime]:
    """
    UTC bounds of one calendar day in the airport's local timezone.
    
    Returns:
        (local midnight of travel_date, local midnight of the next day), both in UTC
    """
    start_local = airport.localize(datetime.combine(travel_date, time.min))
    end_local = airport.localize(datetime.combine(travel_date + timedelta(days=1), time.min))
    return start_local.astimezone(pytz.utc), end_local.astimezone(pytz.utc)


class FlightSearchService:
    """
    Main flight search service.
    
    Validates input and computes the departure window; if the search
    strategy changes only FlightSearchAlgorithm needs to be updated.
    """
    
    def __init__(
        self,
        network: FlightNetwork,
        rules: Optional[ConnectionRules] = None,
        max_stops: int = DEFAULT_MAX_STOPS
    ):
        self.network = network
        self.algorithm = FlightSearchAlgorithm(network.index, rules, max_stops)
    
    @property
    def max_stops(self) -> int:
        return self.algorithm.max_stops
    
    def resolve_airport(self, code: str, role: str = "origin") -> Airport:
        airport = self.network.find_airport(code)
        if airport is None:
            raise UnknownAirportError(code, role)
        return airport
    
    def search(
        self,
        origin: str,
        destination: str,
        travel_date: date
    ) -> List[Itinerary]:
        """
        Find all itineraries from origin to destination departing on
        travel_date, interpreted in the origin airport's local timezone.
        
        Args:
            origin: Origin airport code
            destination: Destination airport code
            travel_date: Local departure date at the origin
            
        Returns:
            Ranked itineraries; empty when nothing matches
            
        Raises:
            UnknownAirportError: if either code is not in the dataset
        """
        origin_airport = self.resolve_airport(origin, "origin")
        self.resolve_airport(destination, "destination")
        
        if origin == destination:
            logger.info("Origin and destination are the same (%s), returning empty result", origin)
            return []
        
        window_start, window_end = departure_window_utc(origin_airport, travel_date)
        logger.debug(
            "Searching %s -> %s on %s, departure window %s .. %s",
            origin, destination, travel_date, window_start.isoformat(), window_end.isoformat()
        )
        
        return self.algorithm.search(origin, destination, window_start, window_end)
