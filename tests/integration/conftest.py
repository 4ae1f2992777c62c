"""Fixtures for tests against a real SQLite database."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from paws.persistence.tables import metadata


@pytest.fixture
def session():
    """Session on a fresh in-memory database with every table created."""
    engine = create_engine("sqlite://")
    metadata.create_all(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()
