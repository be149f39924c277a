"""Pytest bootstrap for project imports."""

import os
from pathlib import Path
import sys

import pytest

# Keep the app's default engine in memory during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Ensure project root is on sys.path so `import moderation_admin` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from moderation_admin import models  # noqa: E402,F401
from moderation_admin.database import Base, build_engine, build_session_factory  # noqa: E402


@pytest.fixture
def db_session():
    """Create test database session"""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    session = build_session_factory(engine)()

    yield session

    session.close()
    engine.dispose()
