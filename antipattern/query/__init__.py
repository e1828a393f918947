#!/usr/bin/env python3
"""
Query Module for the Process Anti-Pattern Detector

Compiles anti-pattern templates into Cypher:
- compile_edge: per-edge statements
- StatementCollection: merged statements
- assemble_queries: final query text
- build_queries / translate: template to query list
"""

from .statements import EdgeMatch, StatementCollection, VertexMatch
from .edge_compiler import VariableCounters, compile_edge
from .assembler import assemble_full_query, assemble_predecessor_query, assemble_queries
from .builder import build_queries, compile_statements, translate

__all__ = [
    'EdgeMatch',
    'StatementCollection',
    'VertexMatch',
    'VariableCounters',
    'compile_edge',
    'assemble_full_query',
    'assemble_predecessor_query',
    'assemble_queries',
    'build_queries',
    'compile_statements',
    'translate'
]
