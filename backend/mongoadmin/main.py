"""
Mongo Admin Console Backend - FastAPI Application

JSON API behind the admin console: lists databases, collections and
documents with storage statistics, and creates or drops them.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from mongoadmin.config import get_settings
from mongoadmin.core.exceptions import AdminError
from mongoadmin.core.responses import admin_error_handler, validation_error_handler
from mongoadmin.routers import collections, databases, health

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("mongoadmin")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Connections are opened per request, so there is nothing to
    initialize or close here besides reporting the target server.
    """
    logger.info("Starting up Mongo Admin backend...")
    logger.info(f"MongoDB server: {settings.mongo_uri or '(not configured)'}")

    yield

    logger.info("Shutting down Mongo Admin backend...")


# Create FastAPI application
app = FastAPI(
    title="Mongo Admin API",
    description="""
## MongoDB Administration API

Backend of the web administration console.

### Features
- **Databases**: List databases with storage statistics, view one database with its documents, create and drop
- **Collections**: List, view, create and drop collections of a database

### Responses
Every endpoint answers with an envelope:
```
{"success": true, "data": {...}}
{"success": false, "errors": {...}}
```
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error envelopes
app.add_exception_handler(AdminError, admin_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Include routers
app.include_router(health.router)
app.include_router(databases.router)
app.include_router(collections.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Mongo Admin API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
