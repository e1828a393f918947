"""Shared fixtures for the anti-pattern detector tests."""

import pytest

from antipattern.graph import UNBOUNDED, create_edge, create_template, create_vertex


class FakeGraphClient:
    """Stands in for Neo4jClient, replaying scripted query responses."""

    def __init__(self, responses=None, default=None):
        self.responses = list(responses or [])
        self.default = default
        self.queries = []
        self.seeded = []
        self.resets = 0
        self.closed = False

    def execute_query(self, query, parameters=None):
        self.queries.append(query)
        if self.responses:
            response = self.responses.pop(0)
        else:
            response = self.default
        if isinstance(response, Exception):
            raise response
        records, elapsed = response if response is not None else ([], 1.0)
        return records, elapsed

    def reset_database(self):
        self.resets += 1

    def seed_graph(self, construction_query):
        self.seeded.append(construction_query)
        return 1

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


@pytest.fixture
def fake_client_factory():
    return FakeGraphClient


@pytest.fixture
def double_opt_template():
    return create_template(
        [
            create_vertex("opt1", "ACTIVITY", "NW_OPT"),
            create_vertex("opt2", "ACTIVITY", "NW_OPT"),
        ],
        [create_edge("opt1", "opt2")],
        name="double-opt"
    )


@pytest.fixture
def missing_reversal_template():
    return create_template(
        [
            create_vertex("red", "ACTIVITY", "NW_RED"),
            create_vertex("rev", "ACTIVITY", "NW_RR"),
            create_vertex("end", "EVENT", "END"),
        ],
        [
            create_edge("red", "end", upper=UNBOUNDED),
            create_edge("red", "rev", upper=UNBOUNDED, missing=True),
        ],
        name="missing-reversal"
    )


@pytest.fixture
def redundant_services_template():
    return create_template(
        [
            create_vertex("s1", "ACTIVITY", "S", placeholder=True),
            create_vertex("s2", "ACTIVITY", "S", placeholder=True),
        ],
        [create_edge("s1", "s2")]
    )
