from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence
import logging

from langchain_core.messages import AIMessage, HumanMessage
from pydantic import BaseModel

from src.core.models import ApiKeys, ChatMessage, Product
from src.generation.llm_builder import get_llm
from src.generation.prompts import PRODUCT_ASSISTANT_PROMPT, build_product_context

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response from AI"


class AssistantError(Exception):
    """The AI provider could not produce an answer."""


class AssistantNotConfiguredError(AssistantError):
    """No API key for the selected provider."""


class ModelOption(BaseModel):
    provider: str
    model: str
    label: str


AI_MODELS: List[ModelOption] = [
    ModelOption(provider="gemini", model="gemini-2.5-pro", label="Gemini 2.5 Pro"),
    ModelOption(provider="gemini", model="gemini-2.5-flash", label="Gemini 2.5 Flash"),
    ModelOption(provider="gemini", model="gemini-2.0-flash", label="Gemini 2.0 Flash"),
    ModelOption(provider="openai", model="gpt-4o", label="GPT-4o"),
    ModelOption(provider="openai", model="gpt-4o-mini", label="GPT-4o Mini"),
    ModelOption(provider="openai", model="gpt-3.5-turbo", label="GPT-3.5 Turbo"),
]


def history_to_messages(history: Sequence[ChatMessage], limit: int = 10) -> List[HumanMessage | AIMessage]:
    """The last ``limit`` chat turns as langchain messages."""
    if limit <= 0:
        return []
    messages = []
    for msg in list(history)[-limit:]:
        if msg.role == "user":
            messages.append(HumanMessage(content=msg.message))
        else:
            messages.append(AIMessage(content=msg.message))
    return messages


def _content_text(result) -> str:
    content = result.content if hasattr(result, "content") else result
    if isinstance(content, list):
        # Gemini may answer with a list of content parts
        content = "".join(
            part.get("text", "") if isinstance(part, dict) else str(part) for part in content
        )
    return str(content or "").strip()


class ProductAssistant:
    """
    Answers visitor questions about the product on screen.

    Provider and model are configuration; ``set_model`` switches both.
    """

    def __init__(
        self,
        api_keys: ApiKeys,
        provider: str = "gemini",
        model: Optional[str] = None,
        history_limit: int = 10,
        llm_factory: Callable = get_llm,
    ) -> None:
        self.api_keys = api_keys
        self.provider = (provider or "gemini").lower()
        self.model = model or next(m.model for m in AI_MODELS if m.provider == self.provider)
        self.history_limit = history_limit
        self._llm_factory = llm_factory
        self._llms: Dict[str, object] = {}
        logger.info(f"AI assistant initializing with provider: {self.provider}, model: {self.model}")

    def _key_for(self, provider: str) -> Optional[str]:
        return self.api_keys.openai if provider == "openai" else self.api_keys.gemini

    def available_models(self) -> List[ModelOption]:
        return [m for m in AI_MODELS if self._key_for(m.provider)]

    @property
    def is_configured(self) -> bool:
        return bool(self._key_for(self.provider))

    def set_model(self, model: str) -> ModelOption:
        option = next((m for m in AI_MODELS if m.model == model), None)
        if option is None:
            raise ValueError(f"Unknown model: {model}")
        self.model = option.model
        self.provider = option.provider
        logger.info(f"AI model changed to: {self.model}, provider: {self.provider}")
        return option

    def _get_llm(self):
        if not self.is_configured:
            raise AssistantNotConfiguredError(
                f"AI service not configured for '{self.provider}'. Please check api-keys.txt file."
            )
        if self.model not in self._llms:
            self._llms[self.model] = self._llm_factory(self.provider, self.model, self.api_keys)
        return self._llms[self.model]

    async def send(
        self,
        user_text: str,
        product: Optional[Product] = None,
        history: Sequence[ChatMessage] = (),
    ) -> str:
        llm = self._get_llm()
        chain = PRODUCT_ASSISTANT_PROMPT | llm

        logger.info(
            f"Sending message to AI ({self.provider}/{self.model}); product: "
            f"{product.name if product else None}, ai.txt: {bool(product and product.ai_context)}"
        )

        try:
            result = await chain.ainvoke({
                "context": build_product_context(product),
                "chat_history": history_to_messages(history, self.history_limit),
                "question": user_text,
            })
        except Exception as e:
            logger.error(f"{self.provider} error: {e}", exc_info=True)
            raise AssistantError(f"Failed to get response from {self.provider}") from e

        return _content_text(result) or NO_RESPONSE
