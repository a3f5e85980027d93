"""
Tests for airport path enumeration.
"""

import pytest

from app.services.search.path_finder import enumerate_airport_paths


@pytest.fixture
def graph():
    """
    A -> B -> C -> D, A -> D, A -> C, B -> A (cycle), D -> E
    """
    return {
        "A": frozenset({"B", "C", "D"}),
        "B": frozenset({"A", "C"}),
        "C": frozenset({"D"}),
        "D": frozenset({"E"}),
    }


class TestEnumerateAirportPaths:
    def test_all_paths_within_two_stops(self, graph):
        paths = enumerate_airport_paths("A", "D", 2, graph)

        assert sorted(paths) == sorted([
            ("A", "D"),
            ("A", "C", "D"),
            ("A", "B", "C", "D"),
        ])

    def test_stop_limit_caps_edges(self, graph):
        assert enumerate_airport_paths("A", "D", 0, graph) == [("A", "D")]
        assert sorted(enumerate_airport_paths("A", "D", 1, graph)) == [("A", "C", "D"), ("A", "D")]

    def test_destination_beyond_limit(self, graph):
        # A -> D -> E needs 1 stop; B -> A -> D -> E needs 2
        assert enumerate_airport_paths("A", "E", 0, graph) == []
        assert enumerate_airport_paths("B", "E", 1, graph) == []

    def test_paths_never_revisit_an_airport(self, graph):
        for path in enumerate_airport_paths("B", "D", 2, graph):
            assert len(path) == len(set(path))
        assert ("B", "A", "B", "C", "D") not in enumerate_airport_paths("B", "D", 3, graph)

    def test_paths_stop_at_destination(self, graph):
        # D is reachable and has outgoing edges; nothing continues past it
        for path in enumerate_airport_paths("A", "D", 2, graph):
            assert path[-1] == "D"
            assert "D" not in path[:-1]

    def test_unknown_or_isolated_airports(self, graph):
        assert enumerate_airport_paths("E", "A", 2, graph) == []
        assert enumerate_airport_paths("Z", "A", 2, graph) == []
        assert enumerate_airport_paths("A", "Z", 2, graph) == []

    def test_deterministic_order(self, graph):
        first = enumerate_airport_paths("A", "D", 2, graph)
        second = enumerate_airport_paths("A", "D", 2, graph)
        assert first == second

    def test_negative_stop_limit_rejected(self, graph):
        with pytest.raises(ValueError):
            enumerate_airport_paths("A", "D", -1, graph)
