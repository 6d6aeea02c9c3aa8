"""
Pytest configuration for the planet API tests.

Tests run against an in-memory SQLite database that is rebuilt for every
test, so generated ids always start at 1.
"""

import os

# Must be set before planet_api.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from planet_api.database import Base, Planet, SessionLocal, engine, SAMPLE_PLANETS


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(database):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database) -> TestClient:
    from api import app
    return TestClient(app)


@pytest.fixture
def planet() -> Planet:
    """A valid planet that is not stored yet."""
    return Planet(name="Dagobah", climate="murky", terrain="swamp, jungles")


@pytest.fixture
def sample_planets(db_session) -> list[Planet]:
    """Tatooine, Alderaan and Yavin IV, stored with ids 1, 2 and 3."""
    planets = [Planet(**data) for data in SAMPLE_PLANETS]
    db_session.add_all(planets)
    db_session.commit()
    for stored in planets:
        db_session.refresh(stored)
    return planets


@pytest.fixture
def tatooine(sample_planets) -> Planet:
    return sample_planets[0]
