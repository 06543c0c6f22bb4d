# config/config.py
import os
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

def _normalize_model(name: str) -> str:
    # Gemini model ids are passed to langchain without the "models/" prefix
    name = (name or "").strip()
    return name[len("models/"):] if name.startswith("models/") else name

# Project root, computed once outside the class
BASE_DIR_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- PATHS ---
    BASE_DIR: str = Field(default=BASE_DIR_PATH)
    # Content root; Sources/, Branding/, CompanyInfo/ and api-keys.txt live here
    APP_DIR: str = Field(default_factory=lambda: os.path.join(BASE_DIR_PATH, "app"))

    # Derived from APP_DIR when left empty
    SOURCES_DIR: Optional[str] = None
    BRANDING_DIR: Optional[str] = None
    COMPANY_INFO_DIR: Optional[str] = None
    API_KEYS_FILE: Optional[str] = None
    CHAT_DB_PATH: Optional[str] = None

    # --- LLM PROVIDER ---
    # Optional here; api-keys.txt fills whatever the environment leaves out
    GOOGLE_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    LLM_PROVIDER: str = "gemini"

    GEMINI_CHAT_MODEL: str = Field(default="gemini-2.5-pro")
    OPENAI_CHAT_MODEL: str = Field(default="gpt-4o-mini")
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 1000
    LLM_MAX_RETRIES: int = 2

    # --- CHAT ---
    CHAT_HISTORY_CONTEXT: int = 10
    CHAT_HISTORY_LIMIT: int = 100

    # --- CONTENT SCAN ---
    SCAN_MAX_DEPTH: int = 16
    SCAN_CACHE_TTL: int = 300

    # --- UX / SESSION (milliseconds) ---
    IDLE_TIME_MS: int = 30000
    SESSION_WARNING_MS: int = 45000
    SESSION_TIMEOUT_MS: int = 60000

    # --- VOICE ---
    TRANSCRIPTION_LANGUAGE: str = "en-US"

    # --- LOGGING ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    ENVIRONMENT: str = "development"

    def __init__(self, **data):
        super().__init__(**data)
        object.__setattr__(self, "GEMINI_CHAT_MODEL", _normalize_model(self.GEMINI_CHAT_MODEL))

        defaults = {
            "SOURCES_DIR": os.path.join(self.APP_DIR, "Sources"),
            "BRANDING_DIR": os.path.join(self.APP_DIR, "Branding"),
            "COMPANY_INFO_DIR": os.path.join(self.APP_DIR, "CompanyInfo"),
            "API_KEYS_FILE": os.path.join(self.APP_DIR, "api-keys.txt"),
            "CHAT_DB_PATH": os.path.join(self.APP_DIR, "data", "chat-history.db"),
        }
        for field, value in defaults.items():
            if not getattr(self, field):
                object.__setattr__(self, field, value)

settings = Settings()
