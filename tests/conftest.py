"""
Pytest configuration and fixtures for PhoneTrack tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def transcripts_dir(fixtures_dir) -> Path:
    """Return path to recorded transcript fixtures."""
    return fixtures_dir / "transcripts"


@pytest.fixture
def stabilizer():
    """Return a TemporalStabilizer with default settings."""
    from phonetrack import TemporalStabilizer

    return TemporalStabilizer()


@pytest.fixture
def session():
    """Return a ScanSession with default settings."""
    from phonetrack import ScanSession

    return ScanSession()
