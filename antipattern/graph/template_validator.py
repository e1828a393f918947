#!/usr/bin/env python3
"""
Template Validator for the Process Anti-Pattern Detector

Validates template structure before any query is compiled from it.
"""

import re
import logging
import numbers
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from ..errors import TemplateReferenceError, TemplateValidationError

logger = logging.getLogger(__name__)

# Vertex ids are used verbatim as Cypher variables
VERTEX_ID_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


@dataclass
class ValidationResult:
    """Result of template validation."""
    is_valid: bool
    reference_errors: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)


class TemplateValidator:
    """Validates anti-pattern templates."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize template validator with configuration."""
        self.config = config or {}

    def validate_template(self, template) -> ValidationResult:
        """Run all structural checks and collect the findings."""
        result = ValidationResult(is_valid=True)

        self._validate_vertices(template, result)
        self._validate_edges(template, result)
        self._validate_edge_order(template, result)
        self._validate_placeholders(template, result)
        self._calculate_metrics(template, result)

        result.is_valid = not result.errors and not result.reference_errors
        return result

    def ensure_valid(self, template) -> ValidationResult:
        """Validate a template and raise on the first class of failure.

        Dangling vertex references raise :class:`TemplateReferenceError`,
        every other structural problem :class:`TemplateValidationError`.
        """
        result = self.validate_template(template)

        for warning in result.warnings:
            logger.warning(f"Template {template.name or '<unnamed>'}: {warning}")

        if result.reference_errors:
            raise TemplateReferenceError("; ".join(result.reference_errors))
        if result.errors:
            raise TemplateValidationError("; ".join(result.errors))

        return result

    def _validate_vertices(self, template, result: ValidationResult):
        """Validate vertex ids and their uniqueness."""
        seen = set()
        for vertex in template._vertex_list:
            if not isinstance(vertex.id, str) or not VERTEX_ID_PATTERN.match(vertex.id):
                result.errors.append(f"Invalid vertex id {vertex.id!r} (must be a valid identifier)")
            if vertex.id in seen:
                result.errors.append(f"Duplicate vertex id: {vertex.id}")
            seen.add(vertex.id)

        for key, vertex in template.vertices.items():
            if key != vertex.id:
                result.errors.append(f"Vertex keyed as {key!r} has id {vertex.id!r}")

    def _validate_edges(self, template, result: ValidationResult):
        """Validate edge references and repetition bounds."""
        if not template.edges:
            result.errors.append("Template contains no edges")
            return

        for index, edge in enumerate(template.edges):
            for endpoint in (edge.source, edge.target):
                if endpoint not in template.vertices:
                    result.reference_errors.append(
                        f"Edge {index} references non-existent vertex {endpoint!r}")

            self._validate_bounds(index, edge, result)

            if edge.condition is not None and not isinstance(edge.condition, str):
                result.errors.append(f"Edge {index} condition must be a string")
            elif edge.condition and '"' in edge.condition:
                result.errors.append(f"Edge {index} condition must not contain double quotes")

    def _validate_bounds(self, index: int, edge, result: ValidationResult):
        """Validate lower and upper repetition bounds of an edge."""
        lower, upper = edge.lower, edge.upper

        if not _is_count(lower):
            result.errors.append(f"Edge {index} lower bound must be a non-negative integer, got: {lower!r}")
            return
        if not (edge.is_unbounded or _is_count(upper)):
            result.errors.append(f"Edge {index} upper bound must be a non-negative integer or unbounded, got: {upper!r}")
            return
        if lower > upper:
            result.errors.append(f"Edge {index} lower bound {lower} exceeds upper bound {upper}")

    def _validate_edge_order(self, template, result: ValidationResult):
        """Missing edges are anchored on the path of an earlier present edge."""
        anchored = False
        for index, edge in enumerate(template.edges):
            if not edge.missing:
                anchored = True
            elif not anchored:
                result.errors.append(
                    f"Missing edge {index} ({edge.source}->{edge.target}) "
                    f"must be preceded by a present edge")

    def _validate_placeholders(self, template, result: ValidationResult):
        """Report placeholder groups that cannot be fully constrained."""
        groups: Dict[str, int] = {}
        for vertex in template.vertices.values():
            if vertex.placeholder:
                groups[vertex.placeholder_group] = groups.get(vertex.placeholder_group, 0) + 1

        for group, size in groups.items():
            if size > 2:
                result.warnings.append(
                    f"Placeholder group {group!r} has {size} members; only the first two are compared")

        result.metrics['placeholder_groups'] = groups

    def _calculate_metrics(self, template, result: ValidationResult):
        """Calculate template size metrics."""
        metrics = result.metrics
        metrics['vertex_count'] = len(template.vertices)
        metrics['edge_count'] = len(template.edges)
        metrics['missing_edge_count'] = sum(1 for edge in template.edges if edge.missing)


def _is_count(value: Any) -> bool:
    """Whether value is a non-negative integer (booleans excluded)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Integral) and value >= 0
