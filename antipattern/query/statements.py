#!/usr/bin/env python3
"""
Statement Collection for the Process Anti-Pattern Detector

Holds the match directives, constraints and placeholder groups produced while
compiling a template, and merges per-edge fragments into a running total.
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from . import cypher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VertexMatch:
    """A vertex that must (or may, when optional) be matched."""
    variable: str
    vertex_type: str
    label: Optional[str] = None
    optional: bool = False

    def pattern(self) -> str:
        return cypher.node_pattern(self.variable, self.vertex_type, self.label)

    def render(self) -> str:
        """Return the MATCH line for this vertex."""
        return cypher.match_line(self.pattern(), self.optional)


@dataclass(frozen=True)
class EdgeMatch:
    """A relationship path bound to a path variable."""
    path_variable: str
    relation_variable: str
    source: str
    target: str
    modifier: str = ""

    def pattern(self) -> str:
        return cypher.relationship_pattern(self.relation_variable, self.source, self.target, self.modifier)

    def render(self) -> str:
        """Return the MATCH line binding the path variable."""
        return cypher.match_line(f"{self.path_variable}={self.pattern()}")


@dataclass
class StatementCollection:
    """Cypher statements which can be combined into a query.

    ``vertex_matches`` is keyed by vertex id; a later write for the same id
    replaces the earlier directive but keeps its first-insertion position.
    """
    vertex_matches: Dict[str, VertexMatch] = field(default_factory=dict)
    edge_matches: List[EdgeMatch] = field(default_factory=list)
    constraints: List[str] = field(default_factory=list)
    placeholders: Dict[str, List[str]] = field(default_factory=dict)

    def add_placeholder(self, group: str, vertex_id: str):
        """Record a vertex as member of a placeholder group."""
        self.placeholders.setdefault(group, []).append(vertex_id)

    def merge(self, other: "StatementCollection") -> "StatementCollection":
        """Merge all statements of ``other`` into this collection.

        Vertex matches overwrite by id (last write wins), edge matches and
        constraints are appended in arrival order without de-duplication and
        placeholder member lists are concatenated per group.
        """
        for vertex_id, vertex_match in other.vertex_matches.items():
            previous = self.vertex_matches.get(vertex_id)
            if previous is not None and previous.optional != vertex_match.optional:
                logger.debug(f"Vertex {vertex_id} optionality overwritten: "
                             f"{previous.optional} -> {vertex_match.optional}")
            self.vertex_matches[vertex_id] = vertex_match

        self.edge_matches.extend(other.edge_matches)
        self.constraints.extend(other.constraints)

        for group, members in other.placeholders.items():
            self.placeholders.setdefault(group, []).extend(members)

        return self

    @property
    def mandatory_matches(self) -> List[VertexMatch]:
        return [m for m in self.vertex_matches.values() if not m.optional]

    @property
    def optional_matches(self) -> List[VertexMatch]:
        return [m for m in self.vertex_matches.values() if m.optional]

    @property
    def path_variables(self) -> List[str]:
        return [m.path_variable for m in self.edge_matches]
