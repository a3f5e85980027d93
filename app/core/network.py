"""
Flight network dependency for FastAPI
The network is loaded once at startup and shared read-only by every request
"""

from fastapi import Request

from dataset.ingestion import FlightNetwork
from app.services.search_service import FlightSearchService


def get_network(request: Request) -> FlightNetwork:
    """
    Return the flight network built during application startup
    """
    network = getattr(request.app.state, 'network', None)
    if network is None:
        raise RuntimeError("Flight network has not been loaded")
    return network


def get_search_service(request: Request) -> FlightSearchService:
    """
    Search service dependency for FastAPI routes
    """
    service = getattr(request.app.state, 'search_service', None)
    if service is None:
        raise RuntimeError("Flight search service has not been initialised")
    return service
