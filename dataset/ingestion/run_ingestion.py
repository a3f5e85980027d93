"""
Master ingestion script - load the dataset and build the in-memory flight network
"""

import argparse
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from dataset.config import read_dataset
from dataset.exceptions import DatasetError, MissingSectionError
from dataset.logging_config import setup_logging
from dataset.ingestion.ingest_flights import ingest_flights
from dataset.ingestion.ingest_reference_data import ingest_airports
from dataset.models import Airport, Flight
from dataset.network_index import FlightNetworkIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlightNetwork:
    """
    Process-lifetime snapshot of the loaded dataset: airports, flights and
    the index built over them. Shared read-only by every search.
    """
    airports: Mapping[str, Airport]
    flights: Tuple[Flight, ...]
    index: FlightNetworkIndex
    stats: Mapping[str, int] = field(default_factory=dict)

    def find_airport(self, code: str) -> Optional[Airport]:
        return self.airports.get(code)


def _section(document: dict, name: str) -> list:
    section = document.get(name)
    if not isinstance(section, list):
        logger.error("Dataset missing '%s' array", name)
        raise MissingSectionError(name)
    return section


def build_network(document: dict) -> FlightNetwork:
    """
    Turn a raw dataset document into a FlightNetwork

    Raises:
        DatasetError: if a section is missing or no valid airports/flights remain
    """
    stats = Counter()

    airports = ingest_airports(_section(document, 'airports'), stats)
    if not airports:
        logger.error("No valid airports could be loaded from dataset")
        raise DatasetError("No valid airports found in dataset")

    flights = ingest_flights(_section(document, 'flights'), airports, stats)
    if not flights:
        logger.error("No valid flights could be loaded from dataset")
        raise DatasetError("No valid flights found in dataset")

    index = FlightNetworkIndex(flights)
    stats['routes'] = len(index.routes)

    return FlightNetwork(
        airports=airports,
        flights=tuple(flights),
        index=index,
        stats=MappingProxyType(dict(stats))
    )


def load_network(location: Union[str, Path, None] = None) -> FlightNetwork:
    """
    Read the dataset file and build the flight network exactly once
    """
    network = build_network(read_dataset(location))
    logger.info(
        "Flight network ready: %d airports, %d flights, %d routes",
        len(network.airports), len(network.flights), network.stats.get('routes', 0)
    )
    return network


def main():
    """
    Run the ingestion pipeline and print a summary of the loaded network
    """
    parser = argparse.ArgumentParser(description='Load the flights dataset and build the search index')
    parser.add_argument('--dataset', default=None, help='Path to the flights JSON dataset')
    parser.add_argument('--log-level', default='INFO', help='Logging level')
    args = parser.parse_args()

    setup_logging(args.log_level)

    print("\n" + "=" * 70)
    print(" " * 20 + "FLIGHT DATASET INGESTION")
    print("=" * 70 + "\n")

    network = load_network(args.dataset)

    print("\n" + "-" * 70)
    print("Dataset Summary:")
    print(f"  Airports:         {len(network.airports)}")
    print(f"  Flights:          {len(network.flights)}")
    print(f"  Routes:           {network.stats.get('routes', 0)}")
    for key, count in sorted(network.stats.items()):
        if key.startswith('skipped_') or key.startswith('duplicate_'):
            print(f"  {key.replace('_', ' ').capitalize() + ':':<18}{count}")

    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    main()
