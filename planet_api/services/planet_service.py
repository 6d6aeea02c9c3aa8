"""
Planet operations used by the HTTP layer.

``PlanetService`` validates input before touching the database, leaves name
uniqueness to the table's unique constraint and reports lookups that find
nothing as ``None``.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from planet_api.database.models import Planet
from planet_api.services.database_service import DatabaseService
from planet_api.services.exceptions import PlanetAlreadyExistsError, PlanetValidationError
from planet_api.services.query_builder import make_query, EXAMPLE_FIELDS

logger = logging.getLogger(__name__)


class PlanetService:
    """Create, read, list and remove planets within one database session."""

    def __init__(self, db: Session):
        self.db_service = DatabaseService(db)

    def create(self, planet: Planet) -> Planet:
        """Persist ``planet`` and return it with its id.

        Raises ``PlanetValidationError`` when a required field is missing or
        empty and ``PlanetAlreadyExistsError`` when the name is taken.
        """
        missing = [
            field for field in EXAMPLE_FIELDS
            if not isinstance(getattr(planet, field, None), str) or not getattr(planet, field)
        ]
        if missing:
            raise PlanetValidationError(missing)

        try:
            created = self.db_service.save_planet(planet)
        except IntegrityError as exc:
            # Only the unique index on name can still fail after validation
            if self.db_service.get_planet_by_name(planet.name) is not None:
                raise PlanetAlreadyExistsError(planet.name) from exc
            raise

        logger.info("Created planet %s (%s)", created.id, created.name)
        return created

    def get_by_id(self, planet_id: int) -> Optional[Planet]:
        return self.db_service.get_planet_by_id(planet_id)

    def get_by_name(self, name: str) -> Optional[Planet]:
        return self.db_service.get_planet_by_name(name)

    def list(self, climate: Optional[str] = None, terrain: Optional[str] = None) -> List[Planet]:
        """List planets, filtered by climate and/or terrain when given."""
        probe = Planet(climate=climate, terrain=terrain)
        return self.db_service.list_planets(make_query(probe))

    def remove(self, planet_id: int) -> bool:
        """Delete a planet by id. Removing an absent planet is not an error."""
        removed = self.db_service.delete_planet_by_id(planet_id) > 0
        if removed:
            logger.info("Removed planet %s", planet_id)
        else:
            logger.debug("Planet %s already absent", planet_id)
        return removed
