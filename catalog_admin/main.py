# -*- coding: utf-8 -*-
"""
Parts Catalogue Admin - Option API Application
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_admin.api import options_router
from catalog_admin.config import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events"""
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Catalogue API: {settings.API_BASE_URL}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")


app = FastAPI(
    title="Parts Catalogue Admin",
    description="Paged and searchable option lists for the parts catalogue",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(options_router, prefix="/api")


# ==================== Health Check ====================

@app.get("/health", tags=["system"])
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "catalog-admin"}


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "catalog_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
