# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict

from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import setup_logger
from api.endpoints.deck import router as deck_router

import deck_designer
from deck_designer.utils.logging_config import DeckDesignerLogger

logger = setup_logger("deck_designer.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    logger.info("Run on application startup.")
    Config.validate()
    log_file = DeckDesignerLogger.configure(debug_mode=Config.DEBUG, log_dir=Config.LOG_DIR)
    logger.info(f"Engine logging to {log_file}")

    yield  # This is where the application runs

    logger.info("Application shutting down.")


logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="Deck Designer API",
    description="""
    # Deck Designer API

    Turns a sketched deck footprint into a 3D framing layout and a bill of
    materials.

    ## Features

    - Structural layout (joists, beams, posts, railings) for any polygon
    - Bill of materials as JSON or CSV
    - Project file export and re-evaluation
    - Fractional-feet measurement parsing

    ## Authentication

    All `/deck` endpoints require an API key in the `X-API-Key` header.

    ## Units

    Footprint points are in canvas units (50 units = 1 meter, canvas Y is
    world Z). Spacings and all returned dimensions are in meters.
    """,
    version=deck_designer.__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Deck",
            "description": "Layout, bill of materials and project files"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)


@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "Deck Designer API is running"}


@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.info("Health check requested")
    return {"status": "healthy", "message": "Deck Designer API is running"}


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    deck_router,
    prefix="/deck",
    tags=["Deck"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included deck router with prefix /deck")

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
