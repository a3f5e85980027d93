"""
Airport listing endpoint for search forms
"""

from typing import List

from fastapi import APIRouter, Depends

from app.core import get_network
from app.models import AirportSummary
from dataset.ingestion import FlightNetwork

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get(
    "",
    response_model=List[AirportSummary],
    summary="List airports",
    description="All airports in the loaded dataset, sorted by code"
)
def list_airports(network: FlightNetwork = Depends(get_network)) -> List[AirportSummary]:
    return [
        AirportSummary(
            code=airport.code,
            city=airport.city,
            name=airport.name,
            country=airport.country
        )
        for airport in sorted(network.airports.values(), key=lambda a: a.code)
    ]
