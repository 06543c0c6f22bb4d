import logging

from src.core.models import ApiKeys

logger = logging.getLogger(__name__)

def get_llm(provider: str, model: str, api_keys: ApiKeys, streaming: bool = False):
    """
    Factory: return the chat model for a provider.
    Supports Gemini and OpenAI; the provider SDK is imported only when used.
    """
    provider = (provider or "").lower()

    if provider == "openai":
        from src.generation.llms.openai_chat import build_openai_llm
        logger.info("LLM Factory: Selecting OpenAI.")
        return build_openai_llm(model, api_keys.openai, streaming)

    if provider != "gemini":
        logger.warning(f"LLM Provider '{provider}' is not supported. Falling back to Gemini.")

    from src.generation.llms.gemini import build_gemini_llm
    logger.info("LLM Factory: Selecting Gemini.")
    return build_gemini_llm(model, api_keys.gemini, streaming)
