import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hrms.core.config import settings
from hrms.core.database import Database
from hrms.db.init_db import init_db
from hrms.api.v1.api import api_router
from hrms.middleware.logging import LoggingMiddleware

logger = logging.getLogger(__name__)

app_config = {
    "title": "HR Management System",
    "description": "Employee records, organization structure and approval workflows",
    "version": "1.0.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
}


def create_app(database: Optional[Database] = None, seed_sample_data: Optional[bool] = None) -> FastAPI:
    """Build the application around its own store.

    Each app owns one ``Database``; nothing is shared between instances.
    """
    database = database or Database()
    seed = settings.SEED_SAMPLE_DATA if seed_sample_data is None else seed_sample_data

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting HR Management System...")
        await init_db(database, seed=seed)
        yield
        await database.dispose()
        logger.info("👋 HR Management System stopped")

    app = FastAPI(lifespan=lifespan, **app_config)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {
            "message": "👋 Welcome to the HR Management System!",
            "status": "active",
            "version": app_config["version"],
            "docs": "/api/docs",
        }

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    return app


app = create_app()
