#!/usr/bin/env python3
"""
Template Model for the Process Anti-Pattern Detector

An anti-pattern template is a small pattern graph: typed vertices, optionally
placeholders for a named group, joined by edges that carry repetition bounds,
an optional relationship condition and a flag marking the connection as one
that must not exist. Templates are immutable and validated when built.
"""

import math
import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field

from ..errors import TemplateValidationError

logger = logging.getLogger(__name__)

# Upper repetition bound of an edge that may repeat without limit
UNBOUNDED = math.inf

Bound = Union[int, float]


class VertexType(Enum):
    """Allowed vertex types of a process model."""
    ACTIVITY = "ACTIVITY"
    EVENT = "EVENT"
    GATEWAY = "GATEWAY"

    @classmethod
    def parse(cls, value: Union[str, "VertexType"]) -> "VertexType":
        """Resolve an enum member from a member or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in cls)
        raise TemplateValidationError(f"Unknown vertex type {value!r} (expected one of {allowed})")


@dataclass(frozen=True)
class TemplateVertex:
    """A vertex of an anti-pattern template.

    For placeholder vertices ``variant`` names the placeholder group instead
    of a concrete label.
    """
    id: str
    type: VertexType
    variant: str = ""
    placeholder: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'type', VertexType.parse(self.type))
        object.__setattr__(self, 'variant', self.variant or "")
        object.__setattr__(self, 'placeholder', bool(self.placeholder))

    @property
    def placeholder_group(self) -> Optional[str]:
        """Name of the placeholder group, None for concrete vertices."""
        return self.variant if self.placeholder else None

    @property
    def label(self) -> Optional[str]:
        """Secondary label constrained in queries, None when unconstrained."""
        if self.placeholder or not self.variant:
            return None
        return self.variant

    def to_dict(self) -> Dict[str, object]:
        """Convert vertex to dictionary format."""
        return {
            "id": self.id,
            "type": self.type.value,
            "variant": self.variant,
            "placeholder": self.placeholder
        }


@dataclass(frozen=True)
class TemplateEdge:
    """A directed edge between two template vertices.

    ``source`` and ``target`` hold vertex ids. ``upper`` may be
    :data:`UNBOUNDED`.
    """
    source: str
    target: str
    lower: Bound = 1
    upper: Bound = 1
    missing: bool = False
    condition: Optional[str] = None

    @property
    def is_unbounded(self) -> bool:
        return self.upper == UNBOUNDED

    def to_dict(self) -> Dict[str, object]:
        """Convert edge to dictionary format."""
        result = {
            "from": self.source,
            "to": self.target,
            "lower": self.lower,
            "upper": None if self.is_unbounded else self.upper,
            "missing": self.missing
        }
        if self.condition:
            result["condition"] = self.condition
        return result


@dataclass(frozen=True)
class Template:
    """Immutable anti-pattern graph: vertices keyed by id plus ordered edges."""
    vertices: Mapping[str, TemplateVertex]
    edges: Tuple[TemplateEdge, ...]
    name: Optional[str] = None
    _vertex_list: Tuple[TemplateVertex, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self):
        vertices = self.vertices
        if isinstance(vertices, Mapping):
            vertex_list = tuple(vertices.values())
            keyed = dict(vertices)
        else:
            vertex_list = tuple(vertices)
            keyed = {}
            for vertex in vertex_list:
                keyed.setdefault(vertex.id, vertex)

        object.__setattr__(self, '_vertex_list', vertex_list)
        object.__setattr__(self, 'vertices', MappingProxyType(keyed))
        object.__setattr__(self, 'edges', tuple(self.edges))

        # Imported here to keep the validator free to import the model
        from .template_validator import TemplateValidator
        TemplateValidator().ensure_valid(self)

    def __hash__(self):
        return hash((tuple(self.vertices.items()), self.edges, self.name))

    def vertex(self, vertex_id: str) -> TemplateVertex:
        """Return the vertex with the given id."""
        return self.vertices[vertex_id]

    @property
    def has_missing_edges(self) -> bool:
        """Whether any edge encodes an absent connection."""
        return any(edge.missing for edge in self.edges)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "Template":
        """Build a template from its dictionary form."""
        from .template_loader import template_from_dict
        return template_from_dict(data)

    def to_dict(self) -> Dict[str, object]:
        """Convert template to dictionary format."""
        result = {
            "vertices": [vertex.to_dict() for vertex in self.vertices.values()],
            "edges": [edge.to_dict() for edge in self.edges]
        }
        if self.name:
            result["name"] = self.name
        return result


def create_vertex(id: str, type: Union[str, VertexType], variant: str = "",
                  placeholder: bool = False) -> TemplateVertex:
    """Create a template vertex.

    Args:
        id: Unique id of the vertex within its template
        type: Vertex type, enum member or name
        variant: Secondary label, or placeholder group name
        placeholder: Whether ``variant`` names a placeholder group
    """
    return TemplateVertex(id=id, type=VertexType.parse(type), variant=variant, placeholder=placeholder)


def create_edge(source: str, target: str, lower: Bound = 1, upper: Bound = 1,
                missing: bool = False, condition: Optional[str] = None) -> TemplateEdge:
    """Create a template edge.

    Defaults to ``[1..1]`` repetition, a present connection and no condition.
    """
    return TemplateEdge(
        source=source,
        target=target,
        lower=lower,
        upper=upper,
        missing=missing,
        condition=condition or None
    )


def create_template(vertices: Iterable[TemplateVertex], edges: Iterable[TemplateEdge],
                    name: Optional[str] = None) -> Template:
    """Create and validate a template from vertices and edges."""
    return Template(vertices=tuple(vertices), edges=tuple(edges), name=name)
