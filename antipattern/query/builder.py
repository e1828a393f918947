#!/usr/bin/env python3
"""
Query Builder for the Process Anti-Pattern Detector

Entry point of the compiler: translates a template into one or two Cypher
queries. Translation is pure and every call owns its variable counters, so
independent templates may be translated concurrently.
"""

import logging
from typing import List

from ..graph.template import Template
from .assembler import assemble_queries
from .edge_compiler import VariableCounters, compile_edge
from .statements import StatementCollection

logger = logging.getLogger(__name__)


def compile_statements(template: Template) -> StatementCollection:
    """Compile every edge of a template and merge the fragments in edge order."""
    counters = VariableCounters()
    statements = StatementCollection()

    for edge in template.edges:
        statements.merge(compile_edge(template, edge, counters))

    return statements


def build_queries(template: Template) -> List[str]:
    """
    Build the Cypher queries for an anti-pattern template.

    Returns:
        ``[full_query]``, or ``[predecessor_query, full_query]`` when the
        template contains a missing edge. The predecessor query must run
        first: no rows means the anti-pattern is present, otherwise the full
        query decides (rows present means the anti-pattern is present).
    """
    statements = compile_statements(template)
    queries = assemble_queries(statements, template.has_missing_edges)

    logger.debug(f"Built {len(queries)} quer{'y' if len(queries) == 1 else 'ies'} "
                 f"for template {template.name or '<unnamed>'}")
    return queries


# The single operation exposed to executors
translate = build_queries
