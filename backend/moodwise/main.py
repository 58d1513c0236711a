"""
FastAPI entrypoint for the MoodWise backend application.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from moodwise.core.config import settings
from moodwise.core.logging_config import configure_logging
from moodwise.api.router import api_router
from moodwise.db.session import init_db

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} API starting (model: {settings.GROQ_MODEL})")
    yield
    logger.info(f"{settings.APP_NAME} API shutting down")


app = FastAPI(
    title="MoodWise API",
    description="Backend API for the MoodWise mood-tracking chat companion",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "MoodWise API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
