#!/usr/bin/env python3
"""
Graph Module for the Process Anti-Pattern Detector

This module provides the template model of anti-pattern graphs:
- Template, TemplateVertex, TemplateEdge: immutable pattern graph
- TemplateValidator: eager structural validation
- load_template: YAML template loading
"""

from .template import (
    UNBOUNDED,
    Template,
    TemplateEdge,
    TemplateVertex,
    VertexType,
    create_edge,
    create_template,
    create_vertex,
)
from .template_validator import TemplateValidator, ValidationResult
from .template_loader import load_template, load_templates, template_from_dict

__all__ = [
    'UNBOUNDED',
    'Template',
    'TemplateEdge',
    'TemplateVertex',
    'VertexType',
    'create_edge',
    'create_template',
    'create_vertex',
    'TemplateValidator',
    'ValidationResult',
    'load_template',
    'load_templates',
    'template_from_dict'
]
