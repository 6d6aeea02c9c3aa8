import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from planet_api.api.router import api_router
from planet_api.database import check_database, get_db, init_database
from planet_api.settings import settings, setup_logging

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    description="""
    **Star Wars planets over HTTP**

    Create, look up, filter and remove planets (name, climate, terrain).

    ## Endpoints:

    - **`POST /planets`** - Create a planet (names are unique)
    - **`GET /planets/{id}`** - Get a planet by ID
    - **`GET /planets/name/{name}`** - Get a planet by name
    - **`GET /planets?climate=&terrain=`** - List planets, optionally filtered
    - **`DELETE /planets/{id}`** - Remove a planet
    """,
    version=settings.api_version,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_redoc else None
)

app.add_middleware(
    CORSMiddleware,
    **settings.get_cors_config()
)

app.include_router(api_router)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    logger.info("Initializing database...")
    init_database()
    logger.info("Database initialized successfully")

@app.get("/")
async def root():
    return {
        "message": f"{settings.project_name} running",
        "version": settings.api_version,
        "status": "operational",
        "endpoints": {
            "create": "POST /planets",
            "get_by_id": "GET /planets/{id}",
            "get_by_name": "GET /planets/name/{name}",
            "list": "GET /planets?climate=&terrain=",
            "remove": "DELETE /planets/{id}"
        },
        "documentation": "/docs"
    }

@app.get("/health")
async def health(db: Session = Depends(get_db)):
    try:
        check_database(db)
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
        reload=settings.api_reload
    )
