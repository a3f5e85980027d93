"""
Dataset ingestion: raw JSON records -> validated domain models
"""

from .ingest_reference_data import ingest_airports
from .ingest_flights import ingest_flights
from .run_ingestion import FlightNetwork, load_network

__all__ = [
    'ingest_airports',
    'ingest_flights',
    'FlightNetwork',
    'load_network'
]
