"""PlanetService: validation, conflicts, filtering and idempotent removal."""

import pytest

from planet_api.database.models import Planet
from planet_api.services import PlanetAlreadyExistsError, PlanetService, PlanetValidationError


@pytest.fixture
def service(db_session) -> PlanetService:
    return PlanetService(db_session)


def test_create_assigns_id(service, planet):
    created = service.create(planet)

    assert created.id == 1
    assert service.get_by_id(1).name == "Dagobah"


@pytest.mark.parametrize(
    "fields, missing",
    [
        ({"climate": "dry", "terrain": "rock"}, ["name"]),
        ({"name": "Hoth", "climate": "", "terrain": "tundra"}, ["climate"]),
        ({"name": "Hoth", "climate": "frozen", "terrain": None}, ["terrain"]),
        ({}, ["name", "climate", "terrain"]),
    ],
)
def test_create_rejects_missing_fields(service, db_session, fields, missing):
    with pytest.raises(PlanetValidationError) as exc_info:
        service.create(Planet(**fields))

    assert exc_info.value.fields == missing
    assert db_session.query(Planet).count() == 0


def test_create_duplicate_name_raises_conflict(service, tatooine):
    with pytest.raises(PlanetAlreadyExistsError) as exc_info:
        service.create(Planet(name="Tatooine", climate="temperate", terrain="ocean"))

    assert exc_info.value.name == "Tatooine"
    assert "already exists" in str(exc_info.value)
    assert len(service.list()) == 3


def test_get_by_id_and_name_return_none_when_absent(service):
    assert service.get_by_id(42) is None
    assert service.get_by_name("Kamino") is None


def test_get_by_name(service, tatooine):
    assert service.get_by_name("Tatooine").id == tatooine.id


def test_list_without_filters_returns_everything(service, sample_planets):
    assert [p.name for p in service.list()] == ["Tatooine", "Alderaan", "Yavin IV"]


def test_list_by_climate(service, sample_planets):
    assert [p.name for p in service.list(climate="Arid")] == ["Tatooine"]


def test_list_by_terrain(service, sample_planets):
    assert [p.name for p in service.list(terrain="jungle, rainforests")] == ["Yavin IV"]


def test_list_with_empty_filters_returns_everything(service, sample_planets):
    assert len(service.list(climate="", terrain="")) == 3


def test_list_with_no_match_is_empty(service, sample_planets):
    assert service.list(climate="Arid", terrain="grasslands, mountains") == []


def test_remove_existing_planet(service, tatooine):
    planet_id = tatooine.id

    assert service.remove(planet_id) is True
    assert service.get_by_id(planet_id) is None


def test_remove_is_idempotent(service, tatooine):
    planet_id = tatooine.id
    service.remove(planet_id)

    assert service.remove(planet_id) is False
    assert service.remove(999) is False
