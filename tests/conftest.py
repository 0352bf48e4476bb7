import sys
from pathlib import Path

import pytest

# Add project root to path (attacker/ and experiments/ are not installed)
sys.path.insert(0, str(Path(__file__).parent.parent))

from splitmix import config, default  # noqa: E402


@pytest.fixture(autouse=True)
def fixed_config(monkeypatch):
    """Deterministic seeding and full-width word output for every test."""
    monkeypatch.setattr(config, 'SEED_MODE', 'fixed')
    monkeypatch.setattr(config, 'SEED', 0xC0FFEE)
    monkeypatch.setattr(config, 'OUTPUT_MODE', 'word')
    monkeypatch.setattr(config, 'OUTPUT_BITS', 64)
    monkeypatch.setattr(config, 'OUTPUT_SELECT', 'high')
    default.reset_default()
    yield
    default.reset_default()
