#!/usr/bin/env python3
"""
Anti-Pattern Detector for the Process Anti-Pattern Detector

Executes compiled anti-pattern queries against a process graph store using
the two-phase protocol: the predecessor query runs first, and only when it
finds the targets of missing edges does the full query decide.
"""

import logging
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from ..errors import DetectionError
from ..graph.template import Template
from ..query.builder import build_queries

logger = logging.getLogger(__name__)


@dataclass
class DetectionResult:
    """Outcome of checking one template against the graph store."""
    template_name: Optional[str]
    detected: bool
    queries: List[str] = field(default_factory=list)
    predecessor_ran: bool = False
    predecessor_found_targets: Optional[bool] = None
    full_query_ran: bool = False
    execution_times_ms: List[float] = field(default_factory=list)

    @property
    def total_time_ms(self) -> float:
        return sum(self.execution_times_ms)

    @property
    def last_time_ms(self) -> float:
        return self.execution_times_ms[-1] if self.execution_times_ms else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format."""
        return {
            "template": self.template_name,
            "detected": self.detected,
            "queries": self.queries,
            "predecessor_ran": self.predecessor_ran,
            "predecessor_found_targets": self.predecessor_found_targets,
            "full_query_ran": self.full_query_ran,
            "execution_times_ms": self.execution_times_ms,
            "total_time_ms": self.total_time_ms
        }


def has_matches(records: List[Dict[str, Any]]) -> bool:
    """Whether any record binds a value.

    An OPTIONAL MATCH without matches still yields a single all-null row.
    """
    return any(any(value is not None for value in record.values()) for record in records)


class AntiPatternDetector:
    """Runs compiled anti-pattern queries through a graph client.

    The client only needs ``execute_query(query) -> (records, elapsed_ms)``.
    """

    def __init__(self, client):
        self.client = client

    def _run(self, query: str):
        try:
            return self.client.execute_query(query)
        except Exception as e:
            logger.error(f"Query execution failed: {e}")
            raise DetectionError(f"Query execution failed: {e}") from e

    def detect(self, template: Template, name: Optional[str] = None) -> DetectionResult:
        """Check whether the template's anti-pattern occurs in the graph."""
        queries = build_queries(template)
        result = DetectionResult(
            template_name=name or template.name,
            detected=False,
            queries=queries
        )

        if len(queries) > 1:
            records, elapsed_ms = self._run(queries[0])
            result.predecessor_ran = True
            result.predecessor_found_targets = has_matches(records)
            result.execution_times_ms.append(elapsed_ms)

            if not result.predecessor_found_targets:
                logger.info(f"Predecessor query found no target vertices after {elapsed_ms:.0f}ms; "
                            f"anti-pattern present without running the full query")
                result.detected = True
                return result

            logger.info(f"Predecessor query found target vertices after {elapsed_ms:.0f}ms; "
                        f"running full query")

        records, elapsed_ms = self._run(queries[-1])
        result.full_query_ran = True
        result.execution_times_ms.append(elapsed_ms)
        result.detected = len(records) > 0

        logger.info(f"Anti-pattern {result.template_name or '<unnamed>'} "
                    f"{'detected' if result.detected else 'not detected'} after {elapsed_ms:.0f}ms")
        return result
