#!/usr/bin/env python3
"""
Example process graphs for benchmarking anti-pattern detection.

Construction statements are separated by blank lines and run one by one.
"""

from typing import Dict, Tuple
from dataclasses import dataclass

from ..catalogue.anti_patterns import AntiPatternId


@dataclass(frozen=True)
class ProcessBenchmark:
    """A process graph together with the anti-patterns expected in it."""
    name: str
    construction_query: str
    expected: Tuple[Tuple[AntiPatternId, bool], ...]

    @property
    def expected_matches(self) -> Dict[AntiPatternId, bool]:
        return dict(self.expected)


INCORRECT_PROCESS = """
CREATE (start:START:EVENT {name: "START"})
-[:FLOW]->(red:NW_RED:ACTIVITY {name:"Reduce"})
-[:FLOW]->(opt1:NW_OPT:ACTIVITY {name:"Optimize"})
-[:FLOW]->(opt2:NW_OPT:ACTIVITY {name:"Optimize"})
-[:FLOW]->(vis:VIS_INV:ACTIVITY {name:"Visualize"})
-[:FLOW]->(end:END:EVENT {name:"END"})"""

CORRECT_PROCESS = """
CREATE (end:END:EVENT {name:"END"});

CREATE (start:START:EVENT {name:"START"})
-[:FLOW]->(red:NW_RED:ACTIVITY {name:"Reduce"})
-[:FLOW]->(opt:NW_OPT:ACTIVITY {name:"Optimize"})
-[:FLOW]->(rev:NW_RR:ACTIVITY {name:"Reverse"})
-[:FLOW]->(x:EXCLUSIVE:GATEWAY {name:"x"});

MATCH (x:EXCLUSIVE:GATEWAY), (end:END)
CREATE (x)
-[:FLOW {condition:"correct topology"}]->(vis:VIS_INV:ACTIVITY {name:"Visualize"})
-[:FLOW]->(end);

MATCH (x:EXCLUSIVE:GATEWAY), (end:END)
CREATE (x)
-[:FLOW {condition:"incorrect topology"}]->(tf:VIS_TOP:ACTIVITY {name:"Identify"})
-[:FLOW]->(end);"""

CONDITIONAL_PROCESS = """
CREATE (end:END:EVENT {name:"END"});

CREATE (start:START:EVENT {name:"START"})
-[:FLOW]->(red:NW_RED:ACTIVITY {name:"Reduce"})
-[:FLOW]->(x:EXCLUSIVE:GATEWAY {name:"x"});

MATCH (x:EXCLUSIVE:GATEWAY), (end:END)
CREATE (x)
-[:FLOW]->(rev:NW_RR:ACTIVITY {name:"Reverse"})
-[:FLOW]->(end);

MATCH (x:EXCLUSIVE:GATEWAY), (end:END)
CREATE (x)
-[:FLOW]->(end);"""


BENCHMARKS: Tuple[ProcessBenchmark, ...] = (
    ProcessBenchmark(
        name="Incorrect Process",
        construction_query=INCORRECT_PROCESS,
        expected=(
            (AntiPatternId.DOUBLE_OPT, True),
            (AntiPatternId.REDUNDANT_SERVICES, True),
            (AntiPatternId.MISSING_REVERSAL, True),
        )
    ),
    ProcessBenchmark(
        name="Correct Process",
        construction_query=CORRECT_PROCESS,
        expected=(
            (AntiPatternId.DOUBLE_OPT, False),
            (AntiPatternId.REDUNDANT_SERVICES, False),
            (AntiPatternId.MISSING_REVERSAL, False),
            (AntiPatternId.ABUSING_OPT, True),
        )
    ),
    ProcessBenchmark(
        name="Conditional Process",
        construction_query=CONDITIONAL_PROCESS,
        expected=(
            (AntiPatternId.MISSING_REVERSAL, True),
        )
    ),
)
