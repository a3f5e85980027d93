"""
Two-stop flight (2-stop) itinerary construction
"""
from typing import List
from datetime import datetime

from dataset.models import Itinerary
from dataset.network_index import FlightNetworkIndex
from .connection_rules import ConnectionRules
from .helpers import extend_with_connections, first_legs_in_window
from .path_finder import AirportPath


class TwoStopFlightSearch:
    """
    Builds itineraries for a 3-leg airport path
    (origin -> via1 -> via2 -> destination)
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
        Chain the connection primitive twice: first -> second, then the
        accepted (first, second) pair -> third.
        
        Args:
            airport_path: (origin, via1, via2, destination)
            window_start: Inclusive lower bound of first-leg departure, UTC
            window_end: Exclusive upper bound of first-leg departure, UTC
            
        Returns:
            List of itineraries with 2 stops
        """
        origin, via1, via2, destination = airport_path
        
        first_leg_flights = self.index.find_by_route(origin, via1)
        second_leg_flights = self.index.find_by_route(via1, via2)
        third_leg_flights = self.index.find_by_route(via2, destination)
        
        if not first_leg_flights or not second_leg_flights or not third_leg_flights:
            return []
        
        itineraries = []
        for first_leg in first_legs_in_window(first_leg_flights, window_start, window_end):
            for first, second in extend_with_connections(first_leg, second_leg_flights, self.rules):
                # previous_legs carries the first leg so the result is [first, second, third]
                for legs in extend_with_connections(
                    second, third_leg_flights, self.rules, previous_legs=(first,)
                ):
                    itineraries.append(Itinerary.of_legs(*legs))
        
        return itineraries
