#!/usr/bin/env python3
"""
Exceptions for the Process Anti-Pattern Detector
"""


class AntiPatternError(Exception):
    """Base exception for anti-pattern detector errors."""
    pass


class TemplateError(AntiPatternError):
    """Base exception for malformed anti-pattern templates."""
    pass


class TemplateReferenceError(TemplateError, LookupError):
    """An edge references a vertex id that is not part of the template."""
    pass


class TemplateValidationError(TemplateError, ValueError):
    """A template violates a structural rule (bounds, types, edge order)."""
    pass


class ConfigurationError(AntiPatternError, ValueError):
    """Configuration file or values are invalid."""
    pass


class DetectionError(AntiPatternError):
    """Running a compiled query against the graph store failed."""
    pass
