#!/usr/bin/env python3
"""
Cypher rendering helpers for the Process Anti-Pattern Detector

Renders node patterns, relationship patterns and the constraint expressions
used by compiled anti-pattern queries.
"""

import math
from typing import Iterable, Optional, Union


def repeat_modifier(lower: int, upper: Union[int, float]) -> str:
    """
    Return the variable-length modifier for a relationship.

    ``[1..1]`` needs no modifier, ``[1..*]`` is ``*``, other unbounded ranges
    keep their lower bound (``*2..``) and bounded ranges both (``*2..5``).
    """
    unbounded = upper == math.inf
    if lower == 1 and upper == 1:
        return ""
    if lower == 1 and unbounded:
        return "*"
    if unbounded:
        return f"*{lower}.."
    return f"*{lower}..{upper}"


def node_pattern(variable: str, vertex_type: str, label: Optional[str] = None) -> str:
    """Return ``(var[:label]:TYPE)``."""
    return f"({variable}{':' + label if label else ''}:{vertex_type})"


def relationship_pattern(variable: str, source: str, target: str, modifier: str = "") -> str:
    """Return ``(source)-[var<modifier>]->(target)``."""
    return f"({source})-[{variable}{modifier}]->({target})"


def match_line(pattern: str, optional: bool = False) -> str:
    """Return a MATCH or OPTIONAL MATCH line for a pattern."""
    return f"{'OPTIONAL ' if optional else ''}MATCH {pattern}"


def absence_constraint(path_variable: str, vertex_variable: str) -> str:
    """Constraint stating that a vertex is not part of a matched path."""
    return f"NONE (n IN nodes({path_variable}) WHERE n={vertex_variable})"


def condition_constraint(relation_variable: str, condition: str) -> str:
    """Constraint on the condition property of a relationship."""
    return f'{relation_variable}.condition="{condition}"'


def label_equality_constraint(first: str, second: str) -> str:
    """Constraint requiring two vertices to carry the same labels."""
    return f"labels({first})=labels({second})"


def where_clause(constraints: Iterable[str]) -> str:
    """Join constraints into a WHERE clause, empty when there are none."""
    constraints = list(constraints)
    if not constraints:
        return ""
    return "WHERE " + "\nAND ".join(constraints)


def return_clause(variables: Iterable[str]) -> str:
    """Return ``RETURN a,b,...``."""
    return "RETURN " + ",".join(variables)
