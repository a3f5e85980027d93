"""
Shared fixtures for the flight search test suite.

Most scenarios run on airports in the UTC zone so that local and UTC
clock times coincide; timezone-sensitive tests use real IANA zones.
"""

import json
from datetime import datetime
from decimal import Decimal

import pytest
import pytz

from dataset.models import Airport, Flight
from dataset.network_index import FlightNetworkIndex
from app.services.search.connection_rules import ConnectionRules


def at(day: int, hour: int, minute: int = 0, month: int = 3, year: int = 2024) -> datetime:
    """UTC instant on a March 2024 day."""
    return datetime(year, month, day, hour, minute, tzinfo=pytz.utc)


# =============================================================================
# AIRPORTS
# =============================================================================


@pytest.fixture
def airports() -> dict:
    """Airports keyed by code; AAA..DDD domestic (US), XXX international (FR)."""
    return {
        "AAA": Airport("AAA", "Alpha Field", "Alpha", "US", "UTC"),
        "BBB": Airport("BBB", "Bravo Field", "Bravo", "US", "UTC"),
        "CCC": Airport("CCC", "Charlie Field", "Charlie", "us", "UTC"),
        "DDD": Airport("DDD", "Delta Field", "Delta", "US", "UTC"),
        "XXX": Airport("XXX", "X-Ray Field", "Xray", "FR", "UTC"),
        "JFK": Airport("JFK", "John F. Kennedy International", "New York", "US", "America/New_York"),
        "LAX": Airport("LAX", "Los Angeles International", "Los Angeles", "US", "America/Los_Angeles"),
        "LHR": Airport("LHR", "London Heathrow", "London", "GB", "Europe/London"),
        "NRT": Airport("NRT", "Narita International", "Tokyo", "JP", "Asia/Tokyo"),
    }


@pytest.fixture
def make_flight(airports):
    """Factory for flights between fixture airports."""

    def _make(number, origin, destination, departure, arrival, price="100.00", airline="SkyPath Airways"):
        return Flight(
            flight_number=number,
            airline=airline,
            origin=airports[origin],
            destination=airports[destination],
            departure_time_utc=departure,
            arrival_time_utc=arrival,
            price=Decimal(price),
            aircraft="A320",
        )

    return _make


@pytest.fixture
def rules() -> ConnectionRules:
    return ConnectionRules()


@pytest.fixture
def window():
    """UTC departure window for 2024-03-15 at a UTC airport."""
    return at(15, 0), at(16, 0)


# =============================================================================
# NETWORKS
# =============================================================================


@pytest.fixture
def chain_flights(make_flight):
    """
    A small network with direct, one-stop and two-stop options AAA -> DDD.

    AAA-DDD direct 08:00-14:00
    AAA-BBB 08:00-10:00, BBB-DDD 11:00-13:00   (1h layover)
    AAA-BBB 08:00-10:00, BBB-CCC 11:00-12:00, CCC-DDD 13:00-14:00
    """
    return [
        make_flight("SP100", "AAA", "DDD", at(15, 8), at(15, 14), "500.00"),
        make_flight("SP200", "AAA", "BBB", at(15, 8), at(15, 10), "100.00"),
        make_flight("SP210", "BBB", "DDD", at(15, 11), at(15, 13), "120.00"),
        make_flight("SP220", "BBB", "CCC", at(15, 11), at(15, 12), "80.00"),
        make_flight("SP230", "CCC", "DDD", at(15, 13), at(15, 14), "70.00"),
    ]


@pytest.fixture
def chain_index(chain_flights) -> FlightNetworkIndex:
    return FlightNetworkIndex(chain_flights)


# =============================================================================
# DATASET DOCUMENTS
# =============================================================================


@pytest.fixture
def dataset_document() -> dict:
    """Raw dataset with local schedule times, including malformed records."""
    return {
        "airports": [
            {"code": "JFK", "name": "John F. Kennedy International", "city": "New York",
             "country": "US", "timezone": "America/New_York"},
            {"code": "LAX", "name": "Los Angeles International", "city": "Los Angeles",
             "country": "US", "timezone": "America/Los_Angeles"},
            {"code": "ORD", "name": "O'Hare International", "city": "Chicago",
             "country": "US", "timezone": "America/Chicago"},
            {"code": "LHR", "name": "London Heathrow", "city": "London",
             "country": "GB", "timezone": "Europe/London"},
            {"code": "BAD", "name": "Broken Zone", "city": "Nowhere",
             "country": "US", "timezone": "Mars/Olympus_Mons"},
            {"code": "NUL", "name": None, "city": "Nowhere", "country": "US", "timezone": "UTC"},
        ],
        "flights": [
            {"flightNumber": "SP101", "airline": "SkyPath Airways", "origin": "JFK", "destination": "LAX",
             "departureTime": "2024-03-15T08:30:00", "arrivalTime": "2024-03-15T11:45:00",
             "price": 299.00, "aircraft": "A320"},
            {"flightNumber": "SP201", "airline": "SkyPath Airways", "origin": "JFK", "destination": "ORD",
             "departureTime": "2024-03-15T06:00:00", "arrivalTime": "2024-03-15T07:45:00",
             "price": "159.10", "aircraft": "E175"},
            {"flightNumber": "SP301", "airline": "SkyPath Airways", "origin": "ORD", "destination": "LAX",
             "departureTime": "2024-03-15T09:00:00", "arrivalTime": "2024-03-15T11:30:00",
             "price": 179.20, "aircraft": "B737"},
            {"flightNumber": "SP701", "airline": "SkyPath Airways", "origin": "JFK", "destination": "LHR",
             "departureTime": "2024-03-15T18:00:00", "arrivalTime": "2024-03-16T06:00:00",
             "price": 629, "aircraft": "B777"},
            {"flightNumber": "SP990", "airline": "SkyPath Airways", "origin": "JFK", "destination": "XXX",
             "departureTime": "2024-03-15T10:00:00", "arrivalTime": "2024-03-15T12:00:00",
             "price": 99.00, "aircraft": "A320"},
            {"flightNumber": "SP991", "airline": "SkyPath Airways", "origin": "LAX", "destination": "JFK",
             "departureTime": "not-a-date", "arrivalTime": "2024-03-15T18:00:00",
             "price": 199.00, "aircraft": "A320"},
            {"flightNumber": "SP992", "airline": "SkyPath Airways", "origin": "ORD", "destination": "JFK",
             "departureTime": "2024-03-15T10:00:00", "arrivalTime": "2024-03-15T10:30:00",
             "price": 99.00, "aircraft": "A320"},
            {"flightNumber": "SP993", "airline": "SkyPath Airways", "origin": "LAX", "destination": "ORD",
             "departureTime": "2024-03-15T10:00:00", "arrivalTime": "2024-03-15T16:00:00",
             "price": "abc", "aircraft": "A320"},
            {"flightNumber": "SP994", "airline": "SkyPath Airways", "origin": "LAX", "destination": "ORD",
             "departureTime": "2024-03-15T10:00:00", "arrivalTime": "2024-03-15T16:00:00",
             "price": 99.00},
            "not-an-object",
        ],
    }


@pytest.fixture
def dataset_file(tmp_path, dataset_document):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps(dataset_document), encoding="utf-8")
    return path
