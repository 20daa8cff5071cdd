import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lambda_exercises import config


@pytest.fixture(autouse=True)
def reset_config():
    """Restore config defaults around every test"""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def sample_numbers():
    """The sample numbers, as a fresh list"""
    return list(config.SAMPLE_NUMBERS)
