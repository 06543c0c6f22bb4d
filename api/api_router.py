from fastapi import APIRouter
from .endpoints.branding import router as branding_router
from .endpoints.catalog import router as catalog_router
from .endpoints.chat import router as chat_router
from .endpoints.health import router as health_router
from .endpoints.media import router as media_router
from .endpoints.voice import router as voice_router

api_router = APIRouter()
api_router.include_router(health_router,   prefix="/health",   tags=["health"])
api_router.include_router(catalog_router,  prefix="/catalog",  tags=["catalog"])
api_router.include_router(media_router,    prefix="/media",    tags=["media"])
api_router.include_router(branding_router, prefix="/branding", tags=["branding"])
api_router.include_router(chat_router,     prefix="/chat",     tags=["chat"])
api_router.include_router(voice_router,    prefix="/voice",    tags=["voice"])
