"""
Test fixtures for workout-manager-api.

Provides the FastAPI test client, sample workout documents, and
environment isolation so tests never reach the network.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-manager-api
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_manager...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_manager.main import app


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


V1_BLOCK = (
    "workouts 4x rst:30s\n"
    "- pull up, 5 3 2 2\n"
    "- 3x db ovh press 2x20lb, 20 12 12 10"
)

V2_BLOCK = (
    "workout, 1/11 7p, (sw1: pull ups, 1 biceps), (garmin=hey, other=hi)\n"
    ". 4, pull up, body, 7 4 3 4, 45s\n"
    ". 4, hammer, 2x25lb, 16 12 8 10, 30s"
)


@pytest.fixture
def v1_block() -> str:
    """The v1 ('workouts') example block."""
    return V1_BLOCK


@pytest.fixture
def v2_block() -> str:
    """The v2 ('workout,') example block."""
    return V2_BLOCK


@pytest.fixture
def sample_document() -> str:
    """A month-style document: week marker, two workouts and a stray note."""
    return (
        "Week 1\n"
        "\n"
        f"{V2_BLOCK}\n"
        "\n"
        "\n"
        "random note that is not a workout\n"
        "\n"
        "workouts 3x rst:60s\n"
        "- squat 135lb, 5 5 5\n"
    )


# ---------------------------------------------------------------------------
# Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch):
    """Keep remote fetch disabled unless a test opts in."""
    from workout_manager.config import settings

    monkeypatch.setattr(settings, "REMOTE_FETCH_ENABLED", False)
    monkeypatch.setattr(settings, "WORKOUT_SOURCE_URL", None)
    monkeypatch.setattr(settings, "WORKOUT_SOURCE_AUTH", None)
    monkeypatch.setattr(settings, "REMOTE_FETCH_MAX_ATTEMPTS", 3)
