from fastapi import APIRouter
from planet_api.api.endpoints import planets

api_router = APIRouter()

api_router.include_router(
    planets.router,
    prefix="/planets",
    tags=["Planets"]
)
