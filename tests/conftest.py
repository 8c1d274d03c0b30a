"""Test configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Drop GORT_* variables inherited from the calling shell."""
    for name in ("GORT_GO_BIN", "GORT_TEST_ARGS", "GORT_ON_DECODE_ERROR", "GORT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def go_test_stream():
    """A short go test -json stream with a subtest, a failure and noise."""
    return [
        '{"Time":"2022-05-01T10:00:00Z","Action":"run","Package":"example.com/pkg","Test":"TestSum"}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"output","Package":"example.com/pkg","Test":"TestSum","Output":"=== RUN   TestSum\\n"}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"pass","Package":"example.com/pkg","Test":"TestSum","Elapsed":0}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"run","Package":"example.com/pkg","Test":"TestDiv/by_zero"}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"fail","Package":"example.com/pkg","Test":"TestDiv/by_zero","Elapsed":0.01}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"skip","Package":"example.com/pkg","Test":"TestSlow","Elapsed":0}\n',
        '{"Time":"2022-05-01T10:00:00Z","Action":"fail","Package":"example.com/pkg","Elapsed":0.02}\n',
    ]


@pytest.fixture(autouse=True)
def restore_logging():
    """gort.cli.main reconfigures logging; undo it so caplog keeps working."""
    root = logging.getLogger()
    level = root.level

    yield

    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)

    for name in ("gort", "gort.cli", "gort.pipeline", "gort.runner"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        logger.disabled = False
