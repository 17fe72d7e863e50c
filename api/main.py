# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict

import roof_layout
from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import setup_logger
from roof_layout.utils.logging_config import RoofLayoutLogger
from api.endpoints.layouts import router as layouts_router

logger = setup_logger("roof_layout.api")


# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Run on application startup.")
    log_file = RoofLayoutLogger.configure(debug_mode=Config.DEBUG, log_dir=Config.LOG_DIR)
    if log_file:
        logger.info(f"Writing solver logs to {log_file}")
    Config.validate()

    yield  # This is where the application runs

    logger.info("Application shutting down.")


logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="Roof Layout API",
    description="""
    # Roof Layout Calculator API

    Computes tile and batten setting-out for pitched roofs.

    ## Features

    - Horizontal tile course layout: spacing, overhangs and bond marks
    - Vertical batten gauge layout: gauges, ridge offset and cut course

    ## Authentication

    Layout endpoints require an API key in the `X-API-Key` header.

    ## Units

    All dimensions are millimetres.
    """,
    version=roof_layout.__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Layouts",
            "description": "Horizontal and vertical layout calculations"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        },
    ],
    lifespan=lifespan,
)


@app.get("/", tags=["Status"])
async def root():
    return {"status": "online", "message": "Roof Layout API is running"}


# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.debug("Health check requested")
    return {"status": "healthy", "message": "Roof Layout API is running"}


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    layouts_router,
    prefix="/layouts",
    tags=["Layouts"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included layouts router with prefix /layouts")

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
