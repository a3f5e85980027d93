"""
Ingest flight records from the dataset document
Resolves airport references and converts local schedule times to UTC
"""

import logging
from collections import Counter
from typing import Any, Iterable, List, Mapping, Optional

from dataset.models import Airport, Flight
from dataset.ingestion.utils import (
    missing_fields, parse_local_datetime, parse_price, text_or_none
)

logger = logging.getLogger(__name__)

# dataset key -> Flight attribute
FLIGHT_FIELDS = {
    'flightNumber': 'flight_number',
    'airline': 'airline',
    'origin': 'origin',
    'destination': 'destination',
    'departureTime': 'departure_time',
    'arrivalTime': 'arrival_time',
    'price': 'price',
    'aircraft': 'aircraft',
}


def process_flight_record(
    record: Any,
    airports_by_code: Mapping[str, Airport],
    stats: Counter
) -> Optional[Flight]:
    """
    Convert a single raw flight record into a Flight, or None if invalid

    Args:
        record: Raw JSON object for one flight
        airports_by_code: Airports already ingested, keyed by code
        stats: Statistics counter to update
    """
    if not isinstance(record, dict):
        stats['skipped_not_an_object'] += 1
        logger.warning("Skipping flight record that is not an object: %r", record)
        return None

    missing = missing_fields(record, FLIGHT_FIELDS)
    if missing:
        stats['skipped_missing_fields'] += 1
        logger.warning("Skipping flight due to missing fields %s. Raw values: %s", missing, record)
        return None

    flight_number = text_or_none(record, 'flightNumber')
    origin_code = text_or_none(record, 'origin').upper()
    destination_code = text_or_none(record, 'destination').upper()

    origin = airports_by_code.get(origin_code)
    if origin is None:
        stats['skipped_unknown_airport'] += 1
        logger.warning("Skipping flight %s due to unknown origin airport code: %s", flight_number, origin_code)
        return None

    destination = airports_by_code.get(destination_code)
    if destination is None:
        stats['skipped_unknown_airport'] += 1
        logger.warning(
            "Skipping flight %s due to unknown destination airport code: %s", flight_number, destination_code
        )
        return None

    departure_text = text_or_none(record, 'departureTime')
    arrival_text = text_or_none(record, 'arrivalTime')
    try:
        departure_utc = parse_local_datetime(departure_text, origin.timezone)
        arrival_utc = parse_local_datetime(arrival_text, destination.timezone)
    except ValueError:
        stats['skipped_invalid_datetime'] += 1
        logger.warning(
            "Skipping flight %s due to invalid datetime. departure='%s', arrival='%s'",
            flight_number, departure_text, arrival_text
        )
        return None

    if arrival_utc <= departure_utc:
        stats['skipped_non_positive_duration'] += 1
        logger.warning(
            "Skipping flight %s because arrival time is not after departure. departure_utc=%s, arrival_utc=%s",
            flight_number, departure_utc.isoformat(), arrival_utc.isoformat()
        )
        return None

    try:
        price = parse_price(record.get('price'))
    except ValueError:
        stats['skipped_invalid_price'] += 1
        logger.warning("Skipping flight %s due to invalid price '%s'", flight_number, record.get('price'))
        return None

    return Flight(
        flight_number=flight_number,
        airline=text_or_none(record, 'airline'),
        origin=origin,
        destination=destination,
        departure_time_utc=departure_utc,
        arrival_time_utc=arrival_utc,
        price=price,
        aircraft=text_or_none(record, 'aircraft')
    )


def ingest_flights(
    records: Iterable[Any],
    airports_by_code: Mapping[str, Airport],
    stats: Optional[Counter] = None
) -> List[Flight]:
    """
    Ingest flight records, skipping malformed ones

    Args:
        records: Raw flight records from the dataset
        airports_by_code: Airports already ingested, keyed by code
        stats: Optional statistics counter to update

    Returns:
        List of valid flights in dataset order
    """
    if stats is None:
        stats = Counter()

    flights = []
    for record in records:
        flight = process_flight_record(record, airports_by_code, stats)
        if flight is not None:
            flights.append(flight)
            stats['flights'] += 1

    skipped = sum(count for key, count in stats.items() if key.startswith('skipped_'))
    logger.info("Flights ingested: %d (skipped records so far: %d)", len(flights), skipped)
    return flights
