from .database_service import DatabaseService
from .exceptions import PlanetError, PlanetValidationError, PlanetAlreadyExistsError
from .planet_service import PlanetService
from .query_builder import make_query

__all__ = [
    "DatabaseService",
    "PlanetError", "PlanetValidationError", "PlanetAlreadyExistsError",
    "PlanetService",
    "make_query"
]
