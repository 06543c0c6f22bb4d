# api/dependencies.py
from functools import lru_cache

from config.config import Settings, settings
from src.core.api_keys import resolve_api_keys
from src.core.cache import ScanCache
from src.generation.assistant import ProductAssistant
from src.services.catalog_service import CatalogService
from src.services.chat_store import ChatHistoryStore
from src.services.transcription import Transcriber


def get_settings() -> Settings:
    return settings


@lru_cache
def get_catalog_service() -> CatalogService:
    return CatalogService(
        sources_dir=settings.SOURCES_DIR,
        company_info_dir=settings.COMPANY_INFO_DIR,
        max_depth=settings.SCAN_MAX_DEPTH,
        cache=ScanCache(ttl=settings.SCAN_CACHE_TTL),
    )


@lru_cache
def get_chat_store() -> ChatHistoryStore:
    return ChatHistoryStore(settings.CHAT_DB_PATH)


@lru_cache
def get_assistant() -> ProductAssistant:
    keys = resolve_api_keys(
        settings.API_KEYS_FILE,
        openai=settings.OPENAI_API_KEY,
        gemini=settings.GOOGLE_API_KEY,
    )
    provider = settings.LLM_PROVIDER.lower()
    model = settings.OPENAI_CHAT_MODEL if provider == "openai" else settings.GEMINI_CHAT_MODEL
    return ProductAssistant(
        api_keys=keys,
        provider=provider,
        model=model,
        history_limit=settings.CHAT_HISTORY_CONTEXT,
    )


@lru_cache
def get_transcriber() -> Transcriber:
    return Transcriber(language=settings.TRANSCRIPTION_LANGUAGE)
