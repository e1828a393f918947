#!/usr/bin/env python3
"""
Template Loader for the Process Anti-Pattern Detector

Builds templates from plain mappings, typically parsed from YAML files.
"""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

import yaml

from ..errors import TemplateValidationError
from .template import UNBOUNDED, Template, create_edge, create_vertex

logger = logging.getLogger(__name__)

UNBOUNDED_TOKENS = {'*', 'inf', 'infinity', 'unbounded', 'n'}


def parse_upper_bound(value: Any) -> Union[int, float]:
    """Parse an upper bound, mapping null and the unbounded tokens to UNBOUNDED."""
    if value is None:
        return UNBOUNDED
    if isinstance(value, str):
        token = value.strip().lower()
        if token in UNBOUNDED_TOKENS:
            return UNBOUNDED
        if token.isdigit():
            return int(token)
        raise TemplateValidationError(f"Invalid upper bound: {value!r}")
    return value


def template_from_dict(data: Mapping[str, Any]) -> Template:
    """
    Build a template from its dictionary form.

    Expected structure::

        name: optional name
        vertices:
          - {id: red, type: ACTIVITY, variant: NW_RED}
        edges:
          - {from: red, to: end, upper: "*"}

    Returns:
        Validated Template
    """
    if not isinstance(data, Mapping):
        raise TemplateValidationError("Template definition must be a mapping")

    raw_vertices = data.get('vertices') or []
    raw_edges = data.get('edges') or []

    if isinstance(raw_vertices, Mapping):
        # Allow {id: {type: ..., variant: ...}} as a shorthand
        raw_vertices = [dict(spec or {}, id=vertex_id) for vertex_id, spec in raw_vertices.items()]

    vertices = []
    for index, spec in enumerate(raw_vertices):
        if not isinstance(spec, Mapping) or 'id' not in spec or 'type' not in spec:
            raise TemplateValidationError(f"Vertex {index} must define 'id' and 'type'")
        vertices.append(create_vertex(
            spec['id'],
            spec['type'],
            variant=spec.get('variant') or "",
            placeholder=bool(spec.get('placeholder', False))
        ))

    edges = []
    for index, spec in enumerate(raw_edges):
        if not isinstance(spec, Mapping) or 'from' not in spec or 'to' not in spec:
            raise TemplateValidationError(f"Edge {index} must define 'from' and 'to'")
        edges.append(create_edge(
            spec['from'],
            spec['to'],
            lower=spec.get('lower', 1),
            upper=parse_upper_bound(spec.get('upper', 1)),
            missing=bool(spec.get('missing', False)),
            condition=spec.get('condition')
        ))

    return Template(vertices=tuple(vertices), edges=tuple(edges), name=data.get('name'))


def load_templates(path: Union[str, Path]) -> List[Template]:
    """Load one template, or a list of templates, from a YAML file."""
    template_path = Path(path)
    try:
        with open(template_path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML template {template_path}: {e}")
        raise TemplateValidationError(f"Invalid YAML in {template_path}: {e}") from e

    if isinstance(raw, Mapping) and 'templates' in raw:
        raw = raw['templates']
    if isinstance(raw, Mapping):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise TemplateValidationError(f"No template definitions found in {template_path}")

    templates = [template_from_dict(item) for item in raw]
    logger.debug(f"Loaded {len(templates)} template(s) from {template_path}")
    return templates


def load_template(path: Union[str, Path]) -> Template:
    """Load a single template from a YAML file."""
    templates = load_templates(path)
    if len(templates) > 1:
        raise TemplateValidationError(f"{path} defines {len(templates)} templates, expected one")
    return templates[0]
