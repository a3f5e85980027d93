"""
One-stop flight (1-stop) itinerary construction
"""
from typing import List
from datetime import datetime

from dataset.models import Itinerary
from dataset.network_index import FlightNetworkIndex
from .connection_rules import ConnectionRules
from .helpers import extend_with_connections, first_legs_in_window
from .path_finder import AirportPath


class OneStopFlightSearch:
    """
    Builds itineraries for a 2-leg airport path (origin -> via -> destination)
    """
    
    def __init__(self, index: FlightNetworkIndex, rules: ConnectionRules):
        self.index = index
        self.rules = rules
    
    def build(
        self,
        airport_path: AirportPath,
        window_start: datetime,
        window_end: datetime
    ) -> List[Itinerary]:
        """
        Pair every first leg departing inside the window with the second legs
        it can connect to.
        
        Args:
            airport_path: (origin, via, destination)
            window_start: Inclusive lower bound of first-leg departure, UTC
            window_end: Exclusive upper bound of first-leg departure, UTC
            
        Returns:
            List of itineraries with 1 stop
        """
        origin, via, destination = airport_path
        
        first_leg_flights = self.index.find_by_route(origin, via)
        second_leg_flights = self.index.find_by_route(via, destination)
        
        if not first_leg_flights or not second_leg_flights:
            return []
        
        itineraries = []
        for first_leg in first_legs_in_window(first_leg_flights, window_start, window_end):
            for legs in extend_with_connections(first_leg, second_leg_flights, self.rules):
                itineraries.append(Itinerary.of_legs(*legs))
        
        return itineraries
