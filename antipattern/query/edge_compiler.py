#!/usr/bin/env python3
"""
Edge Compiler for the Process Anti-Pattern Detector

Translates one template edge at a time into match directives, constraints
and placeholder bookkeeping.
"""

import logging
from dataclasses import dataclass

from ..graph.template import Template, TemplateEdge, TemplateVertex
from . import cypher
from .statements import EdgeMatch, StatementCollection, VertexMatch

logger = logging.getLogger(__name__)


@dataclass
class VariableCounters:
    """Variable counters of a single translation.

    Each translation owns a fresh instance, so translations never share
    state.
    """
    paths: int = 0
    relations: int = 0

    def next_path(self) -> str:
        variable = f"p{self.paths}"
        self.paths += 1
        return variable

    def next_relation(self) -> str:
        variable = f"r{self.relations}"
        self.relations += 1
        return variable

    @property
    def last_path(self) -> str:
        """Most recently allocated path variable."""
        return f"p{self.paths - 1}"


def vertex_match(vertex: TemplateVertex, optional: bool = False) -> VertexMatch:
    """Create the match directive for a template vertex."""
    return VertexMatch(
        variable=vertex.id,
        vertex_type=vertex.type.value,
        label=vertex.label,
        optional=optional
    )


def compile_edge(template: Template, edge: TemplateEdge, counters: VariableCounters) -> StatementCollection:
    """
    Process a single edge of the template.

    Args:
        template: The complete template
        edge: Edge to process, one of ``template.edges``
        counters: Variable counters of the running translation

    Returns:
        Statement collection for the edge
    """
    source = template.vertex(edge.source)
    target = template.vertex(edge.target)
    fragment = StatementCollection()

    fragment.vertex_matches[source.id] = vertex_match(source)
    # the target may be absent from the graph altogether
    fragment.vertex_matches[target.id] = vertex_match(target, optional=edge.missing)

    # allocated for both branches so later names do not depend on the branch
    relation = counters.next_relation()

    if not edge.missing:
        fragment.edge_matches.append(EdgeMatch(
            path_variable=counters.next_path(),
            relation_variable=relation,
            source=source.id,
            target=target.id,
            modifier=cypher.repeat_modifier(edge.lower, edge.upper)
        ))
    else:
        fragment.constraints.append(cypher.absence_constraint(counters.last_path, target.id))

    if edge.condition:
        fragment.constraints.append(cypher.condition_constraint(relation, edge.condition))

    for vertex in (source, target):
        if vertex.placeholder:
            fragment.add_placeholder(vertex.placeholder_group, vertex.id)

    logger.debug(f"Compiled edge {source.id}->{target.id} as {relation} "
                 f"({'missing' if edge.missing else 'present'})")
    return fragment
