#!/usr/bin/env python3
"""
Anti-Pattern Catalogue for the Process Anti-Pattern Detector

Known flawed structures of network analysis process models.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Union
from dataclasses import dataclass

from ..graph.template import UNBOUNDED, Template, create_edge, create_template, create_vertex


class AntiPatternId(Enum):
    """Identifiers of catalogued anti-patterns."""
    DOUBLE_OPT = "apDoubleOpt"
    REDUNDANT_SERVICES = "apRedundantServices"
    NO_CONDITION = "apNoCondition"
    MISSING_REVERSAL = "apMissingReversal"
    ABUSING_OPT = "apAbusingOpt"


@dataclass(frozen=True)
class AntiPattern:
    """A catalogued anti-pattern."""
    id: AntiPatternId
    name: str
    template: Template


def _entry(anti_pattern_id: AntiPatternId, name: str, vertices, edges) -> AntiPattern:
    return AntiPattern(
        id=anti_pattern_id,
        name=name,
        template=create_template(vertices, edges, name=anti_pattern_id.value)
    )


_CATALOGUE: Dict[AntiPatternId, AntiPattern] = {
    entry.id: entry for entry in (
        _entry(
            AntiPatternId.DOUBLE_OPT,
            "Double optimization",
            [
                create_vertex("opt1", "ACTIVITY", "NW_OPT"),
                create_vertex("opt2", "ACTIVITY", "NW_OPT"),
            ],
            [create_edge("opt1", "opt2")]
        ),
        _entry(
            AntiPatternId.REDUNDANT_SERVICES,
            "Redundant services",
            [
                create_vertex("s1", "ACTIVITY", "S", placeholder=True),
                create_vertex("s2", "ACTIVITY", "S", placeholder=True),
            ],
            [create_edge("s1", "s2")]
        ),
        _entry(
            AntiPatternId.NO_CONDITION,
            "No conditional processing of optimization output",
            [
                create_vertex("opt", "ACTIVITY", "NW_OPT"),
                create_vertex("s", "ACTIVITY", "", placeholder=True),
            ],
            [create_edge("opt", "s")]
        ),
        _entry(
            AntiPatternId.MISSING_REVERSAL,
            "Missing reversal of network reduction",
            [
                create_vertex("red", "ACTIVITY", "NW_RED"),
                create_vertex("rev", "ACTIVITY", "NW_RR"),
                create_vertex("end", "EVENT", "END"),
            ],
            [
                create_edge("red", "end", upper=UNBOUNDED),
                create_edge("red", "rev", upper=UNBOUNDED, missing=True),
            ]
        ),
        _entry(
            AntiPatternId.ABUSING_OPT,
            "Using optimization for identification of topology faults",
            [
                create_vertex("opt", "ACTIVITY", "NW_OPT"),
                create_vertex("gw", "GATEWAY", "EXCLUSIVE"),
                create_vertex("tf", "ACTIVITY", "VIS_TOP"),
            ],
            [
                create_edge("opt", "gw", upper=UNBOUNDED),
                create_edge("gw", "tf", condition="incorrect topology"),
            ]
        ),
    )
}

ANTI_PATTERN_CATALOGUE: Mapping[AntiPatternId, AntiPattern] = MappingProxyType(_CATALOGUE)


def get_anti_pattern(anti_pattern_id: Union[str, AntiPatternId]) -> AntiPattern:
    """Look up a catalogued anti-pattern by enum member or id string."""
    try:
        return ANTI_PATTERN_CATALOGUE[AntiPatternId(anti_pattern_id)]
    except ValueError:
        known = ", ".join(member.value for member in AntiPatternId)
        raise KeyError(f"Unknown anti-pattern {anti_pattern_id!r} (known: {known})") from None


def list_anti_patterns() -> List[AntiPattern]:
    """All catalogued anti-patterns in catalogue order."""
    return list(ANTI_PATTERN_CATALOGUE.values())
