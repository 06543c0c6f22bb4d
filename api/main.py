from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.config import settings
from src.core.logger import setup_logging
from .api_router import api_router
from .dependencies import get_catalog_service, get_chat_store

setup_logging("api")
logger = logging.getLogger(__name__)

app = FastAPI(title="Product Showcase Kiosk", version="1.0.0")

# The kiosk UI runs as a separate local process
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
async def _startup():
    categories = get_catalog_service().categories()
    logger.info(f"Kiosk API started; {len(categories)} categories in {settings.SOURCES_DIR}")

@app.on_event("shutdown")
async def _shutdown():
    if get_chat_store.cache_info().currsize:
        get_chat_store().close()
    logger.info("Kiosk API stopped.")

@app.get("/healthz")
async def healthz():
    return {"ok": True}
