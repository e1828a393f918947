"""Tests for the built-in anti-pattern catalogue."""

import pytest

from antipattern.catalogue import (
    ANTI_PATTERN_CATALOGUE,
    AntiPatternId,
    get_anti_pattern,
    list_anti_patterns,
)
from antipattern.query import build_queries


class TestCatalogue:
    """Tests for catalogue contents and lookup."""

    def test_every_id_is_catalogued(self):
        assert set(ANTI_PATTERN_CATALOGUE) == set(AntiPatternId)
        assert [ap.id for ap in list_anti_patterns()] == list(AntiPatternId)

    def test_lookup_by_string(self):
        anti_pattern = get_anti_pattern("apMissingReversal")
        assert anti_pattern.id is AntiPatternId.MISSING_REVERSAL
        assert anti_pattern.name == "Missing reversal of network reduction"

    def test_unknown_id(self):
        with pytest.raises(KeyError, match="apUnknown"):
            get_anti_pattern("apUnknown")

    def test_catalogue_is_read_only(self):
        with pytest.raises(TypeError):
            ANTI_PATTERN_CATALOGUE[AntiPatternId.DOUBLE_OPT] = None

    def test_only_missing_reversal_needs_two_queries(self):
        counts = {ap.id: len(build_queries(ap.template)) for ap in list_anti_patterns()}
        assert counts == {
            AntiPatternId.DOUBLE_OPT: 1,
            AntiPatternId.REDUNDANT_SERVICES: 1,
            AntiPatternId.NO_CONDITION: 1,
            AntiPatternId.MISSING_REVERSAL: 2,
            AntiPatternId.ABUSING_OPT: 1,
        }


class TestCatalogueQueries:
    """Query text of catalogue entries."""

    def test_abusing_optimization(self):
        assert build_queries(get_anti_pattern(AntiPatternId.ABUSING_OPT).template) == [
            "MATCH (opt:NW_OPT:ACTIVITY)\n"
            "MATCH (gw:EXCLUSIVE:GATEWAY)\n"
            "MATCH (tf:VIS_TOP:ACTIVITY)\n"
            "MATCH p0=(opt)-[r0*]->(gw)\n"
            "MATCH p1=(gw)-[r1]->(tf)\n"
            'WHERE r1.condition="incorrect topology"\n'
            "RETURN p0,p1"
        ]

    def test_no_condition(self):
        assert build_queries(get_anti_pattern(AntiPatternId.NO_CONDITION).template) == [
            "MATCH (opt:NW_OPT:ACTIVITY)\n"
            "MATCH (s:ACTIVITY)\n"
            "MATCH p0=(opt)-[r0]->(s)\n"
            "RETURN p0"
        ]
