"""
Flight Search API endpoints
"""

import logging
import uuid
from datetime import date as DateType
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.models import SearchResponse, SearchMetadata, ErrorResponse, SortOption
from app.core import get_search_service
from app.services import FlightSearchService, UnknownAirportError
from app.services.presenter import apply_sort, to_itinerary_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["search"])

AIRPORT_CODE_PATTERN = r"^\s*[A-Za-z]{3}\s*$"


@router.get(
    "/search",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown airport"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    },
    summary="Search for flights",
    description="Search for flight itineraries between origin and destination with up to 2 stops"
)
def search_flights(
    origin: str = Query(..., pattern=AIRPORT_CODE_PATTERN, description="Origin airport IATA code"),
    destination: str = Query(..., pattern=AIRPORT_CODE_PATTERN, description="Destination airport IATA code"),
    date: DateType = Query(..., description="Departure date (ISO 8601), local to the origin"),
    sort: Optional[SortOption] = Query(default=None, description="Optional re-sort of the ranked results"),
    search_service: FlightSearchService = Depends(get_search_service)
) -> SearchResponse:
    """
    Search for flights based on criteria
    
    - **origin**: Origin airport IATA code (3 letters)
    - **destination**: Destination airport IATA code (3 letters)
    - **date**: Departure date (ISO 8601 format)
    - **sort**: Optional sort option (price, duration, departure_time); by default
      results are ranked by stops, total duration, then price
    
    Returns a list of itineraries; the list is empty when nothing matches.
    """
    origin_code = origin.strip().upper()
    destination_code = destination.strip().upper()
    
    logger.info("Search request: origin=%s, destination=%s, date=%s", origin_code, destination_code, date)
    
    try:
        itineraries = search_service.search(
            origin=origin_code,
            destination=destination_code,
            travel_date=date
        )
    except UnknownAirportError as e:
        logger.warning("Bad request: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "UNKNOWN_AIRPORT",
                "message": str(e),
                "details": {
                    "field": e.role,
                    "value": e.code
                }
            }
        )
    except Exception as e:
        logger.exception("Search failed for %s -> %s on %s", origin_code, destination_code, date)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "INTERNAL_ERROR",
                "message": "An internal error occurred while processing the search",
                "details": {"error": str(e)}
            }
        )
    
    itineraries = apply_sort(itineraries, sort)
    
    return SearchResponse(
        search_id=str(uuid.uuid4()),
        origin=origin_code,
        destination=destination_code,
        date=date,
        itineraries=[to_itinerary_response(itinerary) for itinerary in itineraries],
        meta=SearchMetadata(
            returned=len(itineraries),
            max_stops=search_service.max_stops,
            sort=sort
        )
    )
