"""
Pytest fixtures for Focus Analytics tests.
"""
import sys
import pytest
from datetime import datetime
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

# Ensure the project root and src/ are on sys.path so tests can import
# focus_analytics, server.focus_api and the scripts.
ROOT = Path(__file__).resolve().parent.parent
for path in (ROOT, ROOT / "src", ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from focus_analytics import FocusSession, LocationDetails, SessionStatus  # noqa: E402


# ============================================================================
# Session factories
# ============================================================================

_UNSET = object()


def make_session(
    start_time: datetime = datetime(2025, 1, 6, 10, 0),
    status: SessionStatus = SessionStatus.COMPLETED,
    duration: int = 60,
    actual_duration=_UNSET,
    location: Optional[str] = None,
    location_type: str = "",
    session_id: str = "s-1",
    user_id: str = "user-1",
    **metrics,
) -> FocusSession:
    """
    Build a FocusSession with sensible defaults.

    Completed sessions default to finishing exactly on time. Extra
    keyword arguments set the optional metrics (rating, focus, ...).
    """
    if actual_duration is _UNSET:
        actual_duration = duration if status == SessionStatus.COMPLETED else None

    return FocusSession(
        session_id=session_id,
        user_id=user_id,
        start_time=start_time,
        duration=duration,
        status=status,
        actual_duration=actual_duration,
        location=LocationDetails(name=location, type=location_type) if location is not None else None,
        **metrics,
    )


@pytest.fixture
def session_factory():
    """Return the make_session factory."""
    return make_session


# ============================================================================
# Database fixtures
# ============================================================================

def session_row(**overrides) -> dict:
    """Build a focus_sessions CSV row with every column present."""
    from session_simulator import CSV_COLUMNS

    row = {column: "" for column in CSV_COLUMNS}
    row.update(
        {
            "session_id": "s-1",
            "user_id": "user-1",
            "title": "Deep work",
            "start_time": "2025-01-06T10:00:00",
            "duration": "60",
            "status": "completed",
            "actual_duration": "60",
            "active": "1",
        }
    )
    row.update({key: "" if value is None else str(value) for key, value in overrides.items()})
    return row


@pytest.fixture
def create_sessions_database(tmp_path):
    """
    Factory fixture to create a focus_sessions.db file from row dicts.

    Returns a function that accepts a list of rows (see session_row),
    writes them through the simulator's CSV writer and the population
    script, and returns the data directory holding the database.
    """
    from session_simulator import write_csv
    from populate_databases import DATABASE_CONFIGS, populate_database

    def _create_database(rows: list[dict]) -> Path:
        config = DATABASE_CONFIGS[0]
        write_csv(rows, tmp_path / config["csv_file"])
        populate_database(config, base_dir=tmp_path)
        return tmp_path

    return _create_database


@pytest.fixture
def api_client(monkeypatch):
    """
    Factory fixture returning a TestClient bound to a data directory.

    The shared db_manager is pointed at the directory for the duration
    of the test.
    """
    from fastapi.testclient import TestClient
    from server.focus_api.config import Settings
    from server.focus_api.database import db_manager
    from server.focus_api.main import app

    def _client(data_path: Path) -> TestClient:
        monkeypatch.setattr(db_manager, "settings", Settings(data_path=str(data_path)))
        return TestClient(app)

    return _client
