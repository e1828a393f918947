#!/usr/bin/env python3
"""
CLI Interface for the Process Anti-Pattern Detector

Provides command-line interface for printing anti-pattern queries and
running detection against a Neo4j process graph.
"""

from .main import main, cli
from .config import load_config

__all__ = [
    'main',
    'cli',
    'load_config'
]
