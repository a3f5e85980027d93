"""
FastAPI Request/Response Models for Flight Search API
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date as DateType
from decimal import Decimal
from enum import Enum


class SortOption(str, Enum):
    """Optional re-sort of the ranked search results"""
    PRICE = "price"
    DURATION = "duration"
    DEPARTURE_TIME = "departure_time"


class FlightSegment(BaseModel):
    """Individual flight leg in an itinerary, with local times at each end"""
    flight_number: str = Field(..., description="Flight number")
    airline: str = Field(..., description="Airline name")
    origin_code: str = Field(..., description="Origin airport IATA code")
    origin_city: str = Field(..., description="Origin city")
    destination_code: str = Field(..., description="Destination airport IATA code")
    destination_city: str = Field(..., description="Destination city")
    departure_time_local: str = Field(..., description="ISO-8601 departure with offset, origin timezone")
    arrival_time_local: str = Field(..., description="ISO-8601 arrival with offset, destination timezone")
    aircraft: str = Field(..., description="Aircraft type")
    price: Decimal = Field(..., ge=0, description="Leg price")

    class Config:
        json_schema_extra = {
            "example": {
                "flight_number": "SP101",
                "airline": "SkyPath Airways",
                "origin_code": "JFK",
                "origin_city": "New York",
                "destination_code": "LAX",
                "destination_city": "Los Angeles",
                "departure_time_local": "2024-03-15T08:30:00-04:00",
                "arrival_time_local": "2024-03-15T11:45:00-07:00",
                "aircraft": "A320",
                "price": "299.00"
            }
        }


class Layover(BaseModel):
    """Layover at a connection airport between two segments"""
    airport_code: str = Field(..., description="Connection airport IATA code")
    duration_minutes: int = Field(..., ge=0, description="Layover in minutes")


class ItineraryResponse(BaseModel):
    """Complete itinerary with one or more flight segments"""
    segments: List[FlightSegment] = Field(..., min_length=1, max_length=3, description="Flight segments (1-3)")
    layovers: List[Layover] = Field(default_factory=list, description="Layovers between segments")
    stops: int = Field(..., ge=0, le=2, description="Number of stops")
    total_duration_minutes: int = Field(..., description="Total journey duration")
    total_price: Decimal = Field(..., ge=0, description="Sum of segment prices")


class SearchMetadata(BaseModel):
    """Search result metadata"""
    returned: int = Field(..., description="Number of itineraries returned")
    max_stops: int = Field(..., description="Maximum stops considered")
    sort: Optional[SortOption] = Field(default=None, description="Applied re-sort, if any")


class SearchResponse(BaseModel):
    """Flight search response model"""
    search_id: str = Field(..., description="Unique search ID")
    origin: str = Field(..., description="Origin airport IATA code")
    destination: str = Field(..., description="Destination airport IATA code")
    date: DateType = Field(..., description="Departure date in the origin's local time")
    itineraries: List[ItineraryResponse] = Field(..., description="List of found itineraries")
    meta: SearchMetadata = Field(..., description="Search metadata")


class AirportSummary(BaseModel):
    """Airport option for search forms"""
    code: str = Field(..., description="Airport IATA code")
    city: str = Field(..., description="City")
    name: str = Field(..., description="Airport name")
    country: str = Field(..., description="Country")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "UNKNOWN_AIRPORT",
                "message": "Unknown origin airport: XYZ",
                "details": {
                    "field": "origin",
                    "value": "XYZ"
                }
            }
        }
