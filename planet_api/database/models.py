from sqlalchemy import Column, Integer, String, CheckConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class Planet(Base):
    """Planets known to the API"""
    __tablename__ = "planets"
    __table_args__ = (
        # NOT NULL alone lets empty strings through
        CheckConstraint("name <> ''", name="ck_planets_name_not_empty"),
        CheckConstraint("climate <> ''", name="ck_planets_climate_not_empty"),
        CheckConstraint("terrain <> ''", name="ck_planets_terrain_not_empty"),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    climate = Column(String(255), nullable=False)
    terrain = Column(String(255), nullable=False)
    
    def __repr__(self) -> str:
        return f"Planet(id={self.id!r}, name={self.name!r}, climate={self.climate!r}, terrain={self.terrain!r})"
