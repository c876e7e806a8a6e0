import logging

import pytest
import structlog

from classic_algorithms.common.configuration import reset_hub


@pytest.fixture(autouse=True)
def _isolate_global_state():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    reset_hub()
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    reset_hub()


@pytest.fixture
def sample_graph():
    return {
        "A": ["B", "C"],
        "B": ["A", "D"],
        "C": ["A", "D"],
        "D": ["B", "C", "E"],
        "E": ["D"],
    }
