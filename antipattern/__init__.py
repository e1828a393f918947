#!/usr/bin/env python3
"""
Process Anti-Pattern Detector

Compiles anti-pattern templates of process models into Cypher queries and
runs them against process graphs stored in Neo4j.
"""

__version__ = "0.1.0"
__description__ = "Detection of structural anti-patterns in process models stored as property graphs"

import logging
import sys
from typing import Optional

# Get package logger
logger = logging.getLogger(__name__)

# Version info
VERSION_INFO = tuple(map(int, __version__.split('.')))

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_version() -> str:
    """Get the current version string."""
    return __version__


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    
    handlers = [logging.StreamHandler(sys.stdout)]
    
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    
    logger.debug(f"Logging configured at {level} level")


from .errors import (
    AntiPatternError,
    TemplateError,
    TemplateReferenceError,
    TemplateValidationError,
    ConfigurationError,
    DetectionError,
)
from .graph import (
    Template,
    TemplateVertex,
    TemplateEdge,
    VertexType,
    UNBOUNDED,
    create_vertex,
    create_edge,
    load_template,
)
from .query import build_queries, translate

__all__ = [
    'AntiPatternError',
    'TemplateError',
    'TemplateReferenceError',
    'TemplateValidationError',
    'ConfigurationError',
    'DetectionError',
    'Template',
    'TemplateVertex',
    'TemplateEdge',
    'VertexType',
    'UNBOUNDED',
    'create_vertex',
    'create_edge',
    'load_template',
    'build_queries',
    'translate',
    'get_version',
    'setup_logging',
    '__version__'
]
