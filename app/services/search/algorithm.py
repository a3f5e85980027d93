"""
Flight search algorithm - airport paths, then flights, then ranking
"""
import logging
from datetime import datetime
from typing import List, Optional

from dataset.models import Itinerary
from dataset.network_index import FlightNetworkIndex
from .connection_rules import ConnectionRules, DEFAULT_CONNECTION_RULES
from .itinerary_builder import ItineraryBuilder
from .path_finder import enumerate_airport_paths
from .ranking import rank_itineraries

logger = logging.getLogger(__name__)

DEFAULT_MAX_STOPS = 2


class FlightSearchAlgorithm:
    """
    Finds itineraries between two airports for a UTC departure window.

    Stateless between calls: the index is read-only and every search
    allocates its own results, so one instance can serve concurrent
    searches without locking.
    """
    
    def __init__(
        self,
        index: FlightNetworkIndex,
        rules: Optional[ConnectionRules] = None,
        max_stops: int = DEFAULT_MAX_STOPS
    ):
        if max_stops < 0:
            raise ValueError(f"max_stops must be >= 0, got {max_stops}")
        
        self.index = index
        self.rules = rules or DEFAULT_CONNECTION_RULES
        self.max_stops = max_stops
        self.itinerary_builder = ItineraryBuilder(index, self.rules)
        
        longest = max(self.itinerary_builder.supported_leg_counts)
        if max_stops + 1 > longest:
            logger.warning(
                "max_stops=%d exceeds the longest supported path; paths over %d legs are ignored",
                max_stops, longest
            )
    
    def search(
        self,
        origin_code: str,
        destination_code: str,
        window_start: datetime,
        window_end: datetime
    ) -> List[Itinerary]:
        """
        Core search entry point.
        
        Args:
            origin_code: IATA code of origin airport
            destination_code: IATA code of destination airport
            window_start: Inclusive lower bound of first-leg departure, UTC
            window_end: Exclusive upper bound of first-leg departure, UTC
            
        Returns:
            Itineraries ordered by stops, total duration, then total price
        """
        if window_start >= window_end:
            raise ValueError(
                f"window_start ({window_start.isoformat()}) must be before "
                f"window_end ({window_end.isoformat()})"
            )
        
        if origin_code == destination_code:
            logger.info("Origin and destination are the same (%s), returning empty result", origin_code)
            return []
        
        # Step 1: airport paths with 0..max_stops stops
        airport_paths = enumerate_airport_paths(
            origin_code, destination_code, self.max_stops, self.index.route_adjacency
        )
        
        if not airport_paths:
            logger.info(
                "No airport paths found from %s to %s within %d stops",
                origin_code, destination_code, self.max_stops
            )
            return []
        
        # Step 2: time-feasible itineraries per path
        itineraries = []
        for path in airport_paths:
            itineraries.extend(self.itinerary_builder.build(path, window_start, window_end))
        
        if not itineraries:
            logger.info(
                "No time-feasible itineraries found from %s to %s in given departure window",
                origin_code, destination_code
            )
            return []
        
        logger.debug(
            "Found %d itineraries from %s to %s over %d airport paths",
            len(itineraries), origin_code, destination_code, len(airport_paths)
        )
        
        # Step 3: best first
        return rank_itineraries(itineraries)
