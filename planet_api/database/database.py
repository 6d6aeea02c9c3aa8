import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from .models import Base, Planet
from planet_api.settings import settings

logger = logging.getLogger(__name__)

# Fixtures loaded when SEED_SAMPLE_DATA is enabled
SAMPLE_PLANETS = [
    {"name": "Tatooine", "climate": "Arid", "terrain": "Desert"},
    {"name": "Alderaan", "climate": "temperate", "terrain": "grasslands, mountains"},
    {"name": "Yavin IV", "climate": "temperate, tropical", "terrain": "jungle, rainforests"},
]


def build_engine(database_url: str, echo: bool = False):
    """Create an engine for ``database_url``.

    In-memory SQLite databases live inside a single connection, so every
    session has to share it.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=echo
    )


engine = build_engine(settings.database_url, echo=settings.debug)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables():
    """Create all tables in the database"""
    Base.metadata.create_all(bind=engine)

def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def check_database(db) -> bool:
    """Round trip to the database, used by the health endpoint"""
    db.execute(text("SELECT 1"))
    return True

def init_database():
    """Create tables and optionally load the sample planets"""
    create_tables()
    logger.info("Database tables ready")
    
    if not settings.seed_sample_data:
        return
    
    db = SessionLocal()
    try:
        if db.query(Planet).first() is None:
            db.add_all([Planet(**planet) for planet in SAMPLE_PLANETS])
            db.commit()
            logger.info("Seeded %d sample planets", len(SAMPLE_PLANETS))
        else:
            logger.info("Planets already present, skipping sample data")
    except Exception:
        db.rollback()
        logger.exception("Error seeding sample planets")
        raise
    finally:
        db.close()
