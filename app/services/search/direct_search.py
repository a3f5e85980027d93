"""
Direct flight (0-stop) itinerary construction
"""
from typing import List
from datetime import datetime

from dataset.models import Itinerary
from dataset.network_index import FlightNetworkIndex
from .helpers import first_legs_in_window
from .path_finder import AirportPath


class DirectFlightSearch:
    """
    Builds itineraries for a 1-leg airport path (origin -> destination)
    """
    
    def __init__(self, index: FlightNetworkIndex):
        self.index = index
    
    def build(
        self,
        airport_path: AirportPath,
        window_start: datetime,
        window_end: datetime
    ) -> List[Itinerary]:
        """
        Every direct flight on the route departing inside the window.
        
        Args:
            airport_path: (origin, destination)
            window_start: Inclusive lower bound of departure, UTC
            window_end: Exclusive upper bound of departure, UTC
            
        Returns:
            List of itineraries with 0 stops
        """
        origin, destination = airport_path
        flights = self.index.find_by_route(origin, destination)
        
        return [
            Itinerary.of_single_leg(flight)
            for flight in first_legs_in_window(flights, window_start, window_end)
        ]
