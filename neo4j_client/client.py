"""
Neo4j Client for the Process Anti-Pattern Detector
Provides graph database operations using Neo4j driver
"""

import os
import time
import logging
from typing import Dict, List, Any, Optional, Tuple
from neo4j import GraphDatabase, Driver

logger = logging.getLogger(__name__)


class Neo4jClient:
    """Neo4j database client for process graph operations"""

    def __init__(self, uri: str = None, username: str = None, password: str = None,
                 database: str = None, connect: bool = True):
        self.uri = uri or os.getenv("NEO4J_URI", "neo4j://localhost")
        self.username = username or os.getenv("NEO4J_USERNAME", "")
        self.password = password or os.getenv("NEO4J_PASSWORD", "")
        self.database = database or None
        self.driver: Optional[Driver] = None
        if connect:
            self._connect()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Neo4jClient":
        """Create a client from the ``neo4j`` configuration section"""
        neo4j_config = config.get('neo4j', {})
        return cls(
            uri=neo4j_config.get('uri'),
            username=neo4j_config.get('username'),
            password=neo4j_config.get('password'),
            database=neo4j_config.get('database')
        )

    def _connect(self):
        """Establish connection to Neo4j"""
        try:
            if self.username and self.password:
                self.driver = GraphDatabase.driver(
                    self.uri,
                    auth=(self.username, self.password)
                )
            else:
                self.driver = GraphDatabase.driver(self.uri)
            # Test connection
            self.driver.verify_connectivity()
            logger.info(f"Connected to Neo4j at {self.uri}")
        except Exception as e:
            logger.error(f"Failed to connect to Neo4j: {e}")
            raise

    def close(self):
        """Close database connection"""
        if self.driver:
            self.driver.close()
            self.driver = None

    def __enter__(self) -> "Neo4jClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def execute_query(self, query: str, parameters: Dict = None) -> Tuple[List[Dict], float]:
        """Execute a Cypher query and return its records and execution time in ms"""
        if self.driver is None:
            raise RuntimeError("Neo4j client is not connected")

        started = time.perf_counter()
        with self.driver.session(database=self.database) as session:
            result = session.run(query, parameters or {})
            records = [dict(record) for record in result]
            summary = result.consume()

        elapsed_ms = summary.result_available_after
        if elapsed_ms is None:
            elapsed_ms = (time.perf_counter() - started) * 1000
        return records, float(elapsed_ms)

    def reset_database(self):
        """Delete every node and relationship"""
        self.execute_query("MATCH (n) DETACH DELETE (n)")
        logger.info("Cleared process graph database")

    def seed_graph(self, construction_query: str) -> int:
        """Run construction statements separated by blank lines, returns the statement count"""
        statements = [stmt.strip().rstrip(";") for stmt in construction_query.split("\n\n") if stmt.strip()]
        for statement in statements:
            self.execute_query(statement)
        logger.info(f"Seeded process graph with {len(statements)} statement(s)")
        return len(statements)
