"""Provider API keys from the environment and the kiosk's api-keys.txt."""
import logging
from pathlib import Path
from typing import Optional

from src.core.models import ApiKeys

logger = logging.getLogger(__name__)

_KEY_FIELDS = {
    "OPENAI_API_KEY": "openai",
    "GEMINI_API_KEY": "gemini",
    "GOOGLE_API_KEY": "gemini",
}


def load_api_keys(keys_path: str) -> ApiKeys:
    """
    Parse an api-keys.txt file.

    Format, one per line::

        OPENAI_API_KEY=sk-...
        GEMINI_API_KEY=AIza...

    A missing or unreadable file yields empty keys.
    """
    keys = {}
    try:
        content = Path(keys_path).read_text(encoding="utf-8")
    except OSError as e:
        logger.info(f"No API keys file at {keys_path}: {e}")
        return ApiKeys()

    for line in content.splitlines():
        if not line.strip() or "=" not in line:
            continue
        name, _, value = line.partition("=")
        field = _KEY_FIELDS.get(name.strip())
        value = value.strip()
        if field and value and field not in keys:
            keys[field] = value

    return ApiKeys(**keys)


def resolve_api_keys(keys_path: str, openai: Optional[str] = None, gemini: Optional[str] = None) -> ApiKeys:
    """Environment keys win; the file fills the gaps."""
    from_file = load_api_keys(keys_path)
    keys = ApiKeys(
        openai=openai or from_file.openai,
        gemini=gemini or from_file.gemini,
    )
    logger.info(f"API keys loaded: openai={bool(keys.openai)}, gemini={bool(keys.gemini)}")
    return keys
