#!/usr/bin/env python3
"""
Query Assembler for the Process Anti-Pattern Detector

Orders a merged statement collection into Cypher text. Templates with an
absence test compile into two queries: a predecessor query checking whether
the optional target vertices exist at all, followed by the full query.
"""

import logging
from typing import List

from . import cypher
from .statements import StatementCollection

logger = logging.getLogger(__name__)


def placeholder_constraints(statements: StatementCollection) -> List[str]:
    """Label equality constraints for every placeholder group.

    Only the first two recorded members of a group are compared.
    """
    constraints = []
    for members in statements.placeholders.values():
        if len(members) > 1:
            constraints.append(cypher.label_equality_constraint(members[0], members[1]))
        # single members are anonymous placeholders
    return constraints


def assemble_full_query(statements: StatementCollection) -> str:
    """
    Build the full query of a statement collection.

    Mandatory vertex matches come first, then relationship matches, then
    optional vertex matches.
    """
    lines = [m.render() for m in statements.mandatory_matches]
    lines.extend(m.render() for m in statements.edge_matches)
    lines.extend(m.render() for m in statements.optional_matches)

    where = cypher.where_clause(statements.constraints + placeholder_constraints(statements))
    if where:
        lines.append(where)

    lines.append(cypher.return_clause(statements.path_variables))
    return "\n".join(lines)


def assemble_predecessor_query(statements: StatementCollection) -> str:
    """
    Build the query checking that targets of missing edges exist.

    It matches the optional vertices only and returns their variables.
    """
    optional_matches = statements.optional_matches
    if not optional_matches:
        # every missing target was re-matched as mandatory by a later edge
        return "RETURN 1"

    lines = [m.render() for m in optional_matches]
    lines.append(cypher.return_clause(m.variable for m in optional_matches))
    return "\n".join(lines)


def assemble_queries(statements: StatementCollection, has_missing_edges: bool) -> List[str]:
    """Return ``[predecessor, full]`` for absence tests, ``[full]`` otherwise."""
    queries = []
    if has_missing_edges:
        queries.append(assemble_predecessor_query(statements))
    queries.append(assemble_full_query(statements))
    return queries
