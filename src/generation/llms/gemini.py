import logging
from langchain_google_genai import ChatGoogleGenerativeAI
from config.config import settings

logger = logging.getLogger(__name__)

def build_gemini_llm(model: str, api_key: str, streaming: bool = False) -> ChatGoogleGenerativeAI:
    """Gemini chat model. Accepts ids with or without the "models/" prefix."""
    model = model[len("models/"):] if model.startswith("models/") else model
    logger.info(f"Building Gemini LLM: {model} (max {settings.LLM_MAX_TOKENS} tokens)")
    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=settings.LLM_TEMPERATURE,
        max_output_tokens=settings.LLM_MAX_TOKENS,
        max_retries=settings.LLM_MAX_RETRIES,
        streaming=streaming,
    )
