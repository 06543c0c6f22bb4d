# api/endpoints/health.py
import os

from fastapi import APIRouter, Depends

from api.dependencies import get_chat_store, get_settings
from config.config import Settings
from src.services.chat_store import ChatHistoryStore

router = APIRouter()

@router.get("", tags=["Health"], summary="Health Check")
def health_check(
    cfg: Settings = Depends(get_settings),
    store: ChatHistoryStore = Depends(get_chat_store),
):
    return {
        "status": "ok",
        "sources_dir": os.path.isdir(cfg.SOURCES_DIR),
        "chat_persistent": store.is_persistent,
    }
