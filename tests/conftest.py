import sys

import pytest
from loguru import logger

ENV_VARS = ("CONVERTER_ARCHIVE_EXT", "CONVERTER_UTC_OFFSET", "CONVERTER_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test from a scratch directory with no CONVERTER_* overrides."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # main() points loguru at the captured stderr of the test that ran it.
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def sample_data() -> bytes:
    """Binary data covering every byte value."""
    return bytes(range(256)) * 40


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above."""
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
