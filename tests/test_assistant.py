"""
Unit tests for ProductAssistant and prompt context
"""

import asyncio

import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_core.runnables import RunnableLambda

from conftest import make_product
from src.core.models import ApiKeys, ChatMessage
from src.generation.assistant import (
    NO_RESPONSE,
    AssistantError,
    AssistantNotConfiguredError,
    ProductAssistant,
    history_to_messages,
)
from src.generation.prompts import HOME_CONTEXT, build_product_context


class RecordingLLM:
    """llm_factory that records every prompt the chain sends."""

    def __init__(self, reply="Sure!"):
        self.reply = reply
        self.prompts = []
        self.built = []

    def __call__(self, provider, model, api_keys):
        self.built.append((provider, model))

        def respond(prompt_value):
            self.prompts.append(prompt_value.to_messages())
            if isinstance(self.reply, Exception):
                raise self.reply
            return AIMessage(content=self.reply)

        return RunnableLambda(respond)


def _history(n):
    return [
        ChatMessage(timestamp=f"t{i:03d}", role="user" if i % 2 == 0 else "assistant", message=f"m{i}")
        for i in range(n)
    ]


def test_history_to_messages_trims_and_maps_roles():
    messages = history_to_messages(_history(15), limit=10)
    assert len(messages) == 10
    assert messages[0].content == "m5"
    assert isinstance(messages[0], AIMessage)
    assert isinstance(messages[-1], HumanMessage)
    assert history_to_messages(_history(3), limit=0) == []


def test_build_product_context():
    """Test that ai.txt wins over the docx description"""
    assert build_product_context(None) == HOME_CONTEXT

    product = make_product("Lamp", media_count=2).model_copy(update={"description": "Bright lamp"})
    context = build_product_context(product)
    assert "Current Product: Lamp" in context
    assert "Description: Bright lamp" in context
    assert "2 images, 0 videos" in context

    product = product.model_copy(update={"ai_context": "Secret sauce"})
    context = build_product_context(product)
    assert "Secret sauce" in context
    assert "Bright lamp" not in context


def test_send_builds_prompt_from_product_and_history():
    llm = RecordingLLM("It is bright.")
    assistant = ProductAssistant(ApiKeys(gemini="g-key"), history_limit=4, llm_factory=llm)

    reply = asyncio.run(assistant.send("How bright?", make_product("Lamp"), _history(6)))

    assert reply == "It is bright."
    messages = llm.prompts[0]
    assert isinstance(messages[0], SystemMessage)
    assert "Current Product: Lamp" in messages[0].content
    assert [m.content for m in messages[1:-1]] == ["m2", "m3", "m4", "m5"]
    assert isinstance(messages[-1], HumanMessage)
    assert messages[-1].content == "How bright?"
    assert llm.built == [("gemini", "gemini-2.5-pro")]


def test_send_with_fake_chat_model():
    fake = FakeListChatModel(responses=["Hello there"])
    assistant = ProductAssistant(ApiKeys(openai="o-key"), provider="openai", llm_factory=lambda *a: fake)
    assert asyncio.run(assistant.send("hi")) == "Hello there"


def test_empty_reply_becomes_placeholder():
    assistant = ProductAssistant(ApiKeys(gemini="g"), llm_factory=RecordingLLM("   "))
    assert asyncio.run(assistant.send("hi")) == NO_RESPONSE


def test_provider_error_is_wrapped():
    assistant = ProductAssistant(ApiKeys(gemini="g"), llm_factory=RecordingLLM(RuntimeError("quota")))
    with pytest.raises(AssistantError):
        asyncio.run(assistant.send("hi"))


def test_not_configured_without_key():
    assistant = ProductAssistant(ApiKeys(openai="o"), provider="gemini", llm_factory=RecordingLLM())
    assert not assistant.is_configured
    with pytest.raises(AssistantNotConfiguredError):
        asyncio.run(assistant.send("hi"))


def test_available_models_follow_keys():
    assistant = ProductAssistant(ApiKeys(openai="o"), provider="openai")
    assert {m.provider for m in assistant.available_models()} == {"openai"}
    assert assistant.model == "gpt-4o"


def test_set_model_switches_provider_and_caches_per_model():
    llm = RecordingLLM("ok")
    assistant = ProductAssistant(ApiKeys(gemini="g", openai="o"), llm_factory=llm)

    asyncio.run(assistant.send("a"))
    asyncio.run(assistant.send("b"))
    assistant.set_model("gpt-4o-mini")
    asyncio.run(assistant.send("c"))

    assert assistant.provider == "openai"
    assert llm.built == [("gemini", "gemini-2.5-pro"), ("openai", "gpt-4o-mini")]
    with pytest.raises(ValueError):
        assistant.set_model("nope")
