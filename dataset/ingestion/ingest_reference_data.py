"""
Ingest airport reference data from the dataset document
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from dataset.models import Airport
from dataset.ingestion.utils import is_valid_timezone, missing_fields, text_or_none

logger = logging.getLogger(__name__)

AIRPORT_FIELDS = ('code', 'name', 'city', 'country', 'timezone')


def process_airport_record(record: Any, stats: Counter) -> Optional[Airport]:
    """
    Convert a single raw airport record into an Airport, or None if invalid

    Args:
        record: Raw JSON object for one airport
        stats: Statistics counter to update
    """
    if not isinstance(record, dict):
        stats['skipped_not_an_object'] += 1
        logger.warning("Skipping airport record that is not an object: %r", record)
        return None

    missing = missing_fields(record, AIRPORT_FIELDS)
    if missing:
        stats['skipped_missing_fields'] += 1
        logger.warning("Skipping airport due to missing fields %s. Raw values: %s", missing, record)
        return None

    code = text_or_none(record, 'code').upper()
    timezone = text_or_none(record, 'timezone')

    if not is_valid_timezone(timezone):
        stats['skipped_invalid_timezone'] += 1
        logger.warning("Skipping airport with invalid timezone. code=%s, timezone=%s", code, timezone)
        return None

    return Airport(
        code=code,
        name=text_or_none(record, 'name'),
        city=text_or_none(record, 'city'),
        country=text_or_none(record, 'country'),
        timezone=timezone
    )


def ingest_airports(records: Iterable[Any], stats: Optional[Counter] = None) -> Mapping[str, Airport]:
    """
    Ingest airport records into a read-only code -> Airport mapping

    Args:
        records: Raw airport records from the dataset
        stats: Optional statistics counter to update

    Returns:
        Read-only mapping of airport code to Airport
    """
    if stats is None:
        stats = Counter()

    airports: Dict[str, Airport] = {}
    for record in records:
        airport = process_airport_record(record, stats)
        if airport is None:
            continue
        if airport.code in airports:
            stats['duplicate_airports'] += 1
            logger.warning("Duplicate airport code %s, keeping the last record", airport.code)
        else:
            stats['airports'] += 1
        airports[airport.code] = airport

    logger.info("Airports ingested: %d", len(airports))
    return MappingProxyType(airports)
