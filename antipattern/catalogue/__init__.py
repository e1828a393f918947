"""Built-in catalogue of process model anti-patterns."""

from .anti_patterns import (
    ANTI_PATTERN_CATALOGUE,
    AntiPattern,
    AntiPatternId,
    get_anti_pattern,
    list_anti_patterns,
)

__all__ = [
    'ANTI_PATTERN_CATALOGUE',
    'AntiPattern',
    'AntiPatternId',
    'get_anti_pattern',
    'list_anti_patterns'
]
