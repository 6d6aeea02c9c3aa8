import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement
from planet_api.database.models import Planet
from typing import Optional, List

logger = logging.getLogger(__name__)

class DatabaseService:
    """Service for database operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def save_planet(self, planet: Planet) -> Planet:
        """Insert a planet and return it with its generated id"""
        self.db.add(planet)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Constraint violation while saving planet %r", planet.name)
            raise
        self.db.refresh(planet)
        return planet
    
    def get_planet_by_id(self, planet_id: int) -> Optional[Planet]:
        """Get planet by ID"""
        return self.db.query(Planet).filter(Planet.id == planet_id).first()
    
    def get_planet_by_name(self, name: str) -> Optional[Planet]:
        """Get planet by exact name"""
        return self.db.query(Planet).filter(Planet.name == name).first()
    
    def list_planets(self, criteria: List[ColumnElement]) -> List[Planet]:
        """List planets matching every criterion, all planets when there are none"""
        return self.db.query(Planet).filter(*criteria).order_by(Planet.id).all()
    
    def delete_planet_by_id(self, planet_id: int) -> int:
        """Delete planet by ID, returning the number of removed rows"""
        deleted = self.db.query(Planet).filter(Planet.id == planet_id).delete()
        self.db.commit()
        return deleted
