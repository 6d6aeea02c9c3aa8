from .database import (
    build_engine, check_database, create_tables, get_db, init_database,
    engine, SessionLocal, SAMPLE_PLANETS
)
from .models import Base, Planet

__all__ = [
    "build_engine", "check_database", "create_tables", "get_db", "init_database",
    "engine", "SessionLocal", "SAMPLE_PLANETS",
    "Base", "Planet"
]
