"""
Tests for FlightSearchService: airport resolution, local-day departure
windows and delegation to the search algorithm.
"""

from datetime import date, timedelta
from unittest.mock import patch

import pytest

from app.services.search_service import (
    FlightSearchService, UnknownAirportError, departure_window_utc
)
from dataset.ingestion.run_ingestion import build_network
from dataset.models import Airport
from conftest import at


@pytest.fixture
def service(dataset_document):
    return FlightSearchService(build_network(dataset_document))


class TestDepartureWindow:
    def test_utc_airport(self, airports):
        start, end = departure_window_utc(airports["AAA"], date(2024, 3, 15))

        assert start == at(15, 0)
        assert end == at(16, 0)

    def test_new_york_daylight_time(self, airports):
        start, end = departure_window_utc(airports["JFK"], date(2024, 3, 15))

        assert start == at(15, 4)
        assert end == at(16, 4)

    def test_new_york_dst_start_is_23_hours(self, airports):
        start, end = departure_window_utc(airports["JFK"], date(2024, 3, 10))

        assert start == at(10, 5)
        assert end == at(11, 4)
        assert end - start == timedelta(hours=23)

    def test_new_york_dst_end_is_25_hours(self, airports):
        start, end = departure_window_utc(airports["JFK"], date(2024, 11, 3))

        assert start == at(3, 4, month=11)
        assert end == at(4, 5, month=11)
        assert end - start == timedelta(hours=25)

    def test_repeated_midnight_starts_at_earlier_offset(self):
        # Havana falls back from 01:00 CDT to 00:00 CST, so midnight occurs twice
        havana = Airport("HAV", "Jose Marti International", "Havana", "CU", "America/Havana")

        start, end = departure_window_utc(havana, date(2024, 11, 3))

        assert start == at(3, 4, month=11)
        assert end == at(4, 5, month=11)

    def test_tokyo_window_starts_previous_utc_day(self, airports):
        start, end = departure_window_utc(airports["NRT"], date(2024, 3, 15))

        assert start == at(14, 15)
        assert end == at(15, 15)


class TestAirportResolution:
    def test_unknown_origin(self, service):
        with pytest.raises(UnknownAirportError) as exc_info:
            service.search("XYZ", "LAX", date(2024, 3, 15))

        assert exc_info.value.role == "origin"
        assert exc_info.value.code == "XYZ"
        assert str(exc_info.value) == "Unknown origin airport: XYZ"

    def test_unknown_destination(self, service):
        with pytest.raises(UnknownAirportError) as exc_info:
            service.search("JFK", "XYZ", date(2024, 3, 15))

        assert exc_info.value.role == "destination"

    def test_unknown_airport_is_a_value_error(self, service):
        with pytest.raises(ValueError):
            service.resolve_airport("BAD")

    def test_same_origin_and_destination(self, service):
        assert service.search("JFK", "JFK", date(2024, 3, 15)) == []


class TestSearch:
    def test_direct_and_one_stop(self, service):
        result = service.search("JFK", "LAX", date(2024, 3, 15))

        assert [[leg.flight_number for leg in i.legs] for i in result] == [
            ["SP101"],
            ["SP201", "SP301"],
        ]

    def test_other_local_day_has_no_results(self, service):
        assert service.search("JFK", "LAX", date(2024, 3, 16)) == []

    def test_delegates_window_to_algorithm(self, service):
        with patch.object(service.algorithm, "search", return_value=[]) as search:
            service.search("JFK", "LHR", date(2024, 3, 15))

        search.assert_called_once_with("JFK", "LHR", at(15, 4), at(16, 4))

    def test_max_stops(self, dataset_document):
        service = FlightSearchService(build_network(dataset_document), max_stops=0)

        result = service.search("JFK", "LAX", date(2024, 3, 15))

        assert service.max_stops == 0
        assert [i.stops for i in result] == [0]
