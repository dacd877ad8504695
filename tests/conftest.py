"""
Test configuration and fixtures.
"""

# tests/conftest.py
import pytest
from typing import TypeVar, Callable

from optica import config

T = TypeVar('T')

def fixture(obj: T) -> Callable[[], T]:
    @pytest.fixture
    def _fixture() -> T:
        return obj
    return _fixture

# Common test objects that will be available to all tests
test_objects = {
    "person": {"name": "Ada", "age": 30},
    "nested": {"a": {"b": {"c": 1}}, "xs": [{"id": 1}, {"id": 2}]},
    "list_123": [1, 2, 3],
    "empty_dict": {},
}

# Register fixtures globally
globals().update({
    name: fixture(obj)
    for name, obj in test_objects.items()
})


@pytest.fixture(autouse=True)
def reset_settings():
    yield
    config.reset()
