"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from moodwise.api.routes import chat, users, moods

api_router = APIRouter()

# Include all route modules
api_router.include_router(chat.router)
api_router.include_router(users.router)
api_router.include_router(moods.router)
