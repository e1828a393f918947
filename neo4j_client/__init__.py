"""Neo4j access for process graphs."""

from .client import Neo4jClient

__all__ = ['Neo4jClient']
