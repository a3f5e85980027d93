"""
Itinerary builder - turns one airport path into time-feasible itineraries
"""
import logging
from datetime import datetime
from typing import Callable, Dict, List

from dataset.models import Itinerary
from dataset.network_index import FlightNetworkIndex
from .connection_rules import ConnectionRules
from .direct_search import DirectFlightSearch
from .one_stop_search import OneStopFlightSearch
from .path_finder import AirportPath
from .two_stop_search import TwoStopFlightSearch

logger = logging.getLogger(__name__)

PathBuilder = Callable[[AirportPath, datetime, datetime], List[Itinerary]]


class ItineraryBuilder:
    """
    Dispatches an airport path to the builder for its leg count
    (1 = direct, 2 = one stop, 3 = two stops).
    """
    
    def __init__(self, index: FlightNetworkIndex, rules: ConnectionRules):
        self.index = index
        self.rules = rules
        
        self.direct_search = DirectFlightSearch(index)
        self.one_stop_search = OneStopFlightSearch(index, rules)
        self.two_stop_search = TwoStopFlightSearch(index, rules)
        
        self._builders: Dict[int, PathBuilder] = {
            1: self.direct_search.build,
            2: self.one_stop_search.build,
            3: self.two_stop_search.build,
        }
    
    @property
    def supported_leg_counts(self):
        return tuple(sorted(self._builders))
    
    def build(
        self,
        airport_path: AirportPath,
        window_start: datetime,
        window_end: datetime
    ) -> List[Itinerary]:
        """
        Build every rule-valid itinerary along airport_path whose first leg
        departs inside [window_start, window_end).
        """
        legs = len(airport_path) - 1
        builder = self._builders.get(legs)
        if builder is None:
            logger.warning(
                "Ignoring airport path with %d legs (supported: %s): %s",
                legs, self.supported_leg_counts, '->'.join(airport_path)
            )
            return []
        
        return builder(airport_path, window_start, window_end)
