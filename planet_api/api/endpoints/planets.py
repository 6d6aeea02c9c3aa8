from fastapi import APIRouter, HTTPException, Path, Query, Depends, status
from planet_api.schemas import PlanetCreate, PlanetResponse
from planet_api.services import PlanetService, PlanetAlreadyExistsError, PlanetValidationError
from planet_api.database import get_db
from planet_api.database.models import Planet
from sqlalchemy.orm import Session
from typing import List, Optional

router = APIRouter()

# Generated ids are positive 64-bit integers
MAX_PLANET_ID = 2**63 - 1

def get_planet_service(db: Session = Depends(get_db)) -> PlanetService:
    return PlanetService(db)

def planet_id_path(description: str):
    return Path(..., ge=1, le=MAX_PLANET_ID, description=description)

@router.post("", response_model=PlanetResponse, status_code=status.HTTP_201_CREATED)
def create_planet(
    request: PlanetCreate,
    service: PlanetService = Depends(get_planet_service)
):
    """
    Create a planet. Names are unique: a duplicate name returns 409.
    """
    try:
        return service.create(Planet(**request.model_dump()))
    except PlanetAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PlanetValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("", response_model=List[PlanetResponse])
def list_planets(
    climate: Optional[str] = Query(default=None, description="Exact climate to match"),
    terrain: Optional[str] = Query(default=None, description="Exact terrain to match"),
    service: PlanetService = Depends(get_planet_service)
):
    """
    List planets. Without filters every planet is returned; filters combine with AND.
    """
    try:
        return service.list(climate=climate, terrain=terrain)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/name/{name}", response_model=PlanetResponse)
def get_planet_by_name(
    name: str,
    service: PlanetService = Depends(get_planet_service)
):
    """
    Get a planet by its exact name.
    """
    try:
        planet = service.get_by_name(name)
        if not planet:
            raise HTTPException(status_code=404, detail=f"Planet {name} not found")
        return planet
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{planet_id}", response_model=PlanetResponse)
def get_planet(
    planet_id: int = planet_id_path("Planet ID"),
    service: PlanetService = Depends(get_planet_service)
):
    """
    Get a planet by ID.
    """
    try:
        planet = service.get_by_id(planet_id)
        if not planet:
            raise HTTPException(status_code=404, detail=f"Planet {planet_id} not found")
        return planet
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/{planet_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_planet(
    planet_id: int = planet_id_path("ID of the planet to remove"),
    service: PlanetService = Depends(get_planet_service)
):
    """
    Remove a planet by ID. Removing a planet that does not exist also returns 204.
    """
    try:
        service.remove(planet_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return None
