"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import (
    payment_methods_router,
    profile_router,
    qr_codes_router,
    social_links_router,
)
from app.config import settings
from app.db import engine

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield
    await engine.dispose()


app = FastAPI(
    title="Tipjar Profile Service",
    description="Backend for creator profile pages: social links, payment methods and QR codes",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware (can't use allow_origins=["*"] with allow_credentials=True)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(profile_router, prefix="/api/v1")
app.include_router(social_links_router, prefix="/api/v1")
app.include_router(payment_methods_router, prefix="/api/v1")
app.include_router(qr_codes_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "tipjar-profile-service"}


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": "Tipjar Profile Service",
        "version": "0.1.0",
        "docs": "/docs",
    }
