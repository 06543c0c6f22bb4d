import logging
from langchain_openai import ChatOpenAI
from config.config import settings

logger = logging.getLogger(__name__)

def build_openai_llm(model: str, api_key: str, streaming: bool = False) -> ChatOpenAI:
    """OpenAI chat model with the kiosk's shared sampling settings."""
    logger.info(f"Building OpenAI LLM: {model} (max {settings.LLM_MAX_TOKENS} tokens)")
    return ChatOpenAI(
        model=model,
        api_key=api_key,
        temperature=settings.LLM_TEMPERATURE,
        max_tokens=settings.LLM_MAX_TOKENS,
        max_retries=settings.LLM_MAX_RETRIES,
        streaming=streaming,
    )
