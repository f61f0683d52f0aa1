"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def example_object():
    """Object with a nested mapping, an explicit null and a primitive array."""
    return {"a": 1, "b": {"c": True, "d": None}, "e": [1, 2, 3]}


@pytest.fixture
def heterogeneous_records():
    """Records that do not share the same keys."""
    return [{"x": 1}, {"y": 2}]


@pytest.fixture
def nested_record():
    """Deeply nested record with an array of objects."""
    return {
        "id": "order-1",
        "customer": {
            "name": "Ada",
            "address": {"city": "London", "zip": None},
        },
        "items": [
            {"sku": "A1", "qty": 2},
            {"sku": "B2", "qty": 1, "tags": ["gift", "fragile"]},
        ],
        "notes": [],
        "extra": {},
    }
