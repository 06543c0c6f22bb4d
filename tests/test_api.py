"""
Tests for the kiosk HTTP API
"""

import asyncio
import time

import httpx
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models import FakeListChatModel

from api.dependencies import (
    get_assistant,
    get_catalog_service,
    get_chat_store,
    get_settings,
    get_transcriber,
)
from api.main import app
from config.config import Settings
from conftest import write_file
from src.core.cache import ScanCache
from src.core.models import ApiKeys
from src.generation.assistant import ProductAssistant
from src.services.catalog_service import CatalogService
from src.services.chat_store import ChatHistoryStore
from src.services.transcription import Transcriber


class StubTranscriber(Transcriber):
    def __init__(self):
        super().__init__("en-US")

    def transcribe(self, audio_bytes):
        from src.services.transcription import TranscriptionResult
        if not audio_bytes:
            return TranscriptionResult(success=False, error="No audio data")
        return TranscriptionResult(success=True, text=f"{len(audio_bytes)} bytes")


@pytest.fixture
def app_dir(tmp_path):
    write_file(str(tmp_path / "Sources" / "Tools" / "Hammer" / "Photos" / "h.jpg"), b"IMG")
    write_file(str(tmp_path / "Sources" / "Tools" / "Hammer" / "ai.txt"), "Forged steel head")
    write_file(str(tmp_path / "Sources" / "ASSETS" / "Idle" / "idle_time.txt"), "45")
    write_file(str(tmp_path / "CompanyInfo" / "Photos" / "hq.jpg"))
    return tmp_path


@pytest.fixture
def client(app_dir):
    cfg = Settings(APP_DIR=str(app_dir))
    store = ChatHistoryStore(None)
    assistant = ProductAssistant(
        ApiKeys(gemini="g-key"),
        llm_factory=lambda *a: FakeListChatModel(responses=["A fine hammer.", "Still fine."]),
    )
    catalog = CatalogService(cfg.SOURCES_DIR, cfg.COMPANY_INFO_DIR, cache=ScanCache())

    app.dependency_overrides[get_settings] = lambda: cfg
    app.dependency_overrides[get_chat_store] = lambda: store
    app.dependency_overrides[get_assistant] = lambda: assistant
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    app.dependency_overrides[get_transcriber] = StubTranscriber
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    res = client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "sources_dir": True, "chat_persistent": False}


def test_catalog_tree(client, app_dir):
    res = client.get("/api/v1/catalog")
    assert res.status_code == 200
    categories = res.json()["categories"]
    assert [c["id"] for c in categories] == ["Tools"]
    hammer = categories[0]["products"][0]
    assert hammer["ai_context"] == "Forged steel head"
    assert hammer["path"] == str(app_dir / "Sources" / "Tools" / "Hammer")


def test_idle_and_company(client):
    assert client.get("/api/v1/catalog/idle").json()["timeout_seconds"] == 45
    assert client.get("/api/v1/catalog/company").json()["media"][0]["filename"] == "hq.jpg"
    assert client.get("/api/v1/catalog/company/logo").json() == {"logo": None}


def test_branding_defaults(client):
    res = client.get("/api/v1/branding")
    assert res.status_code == 200
    assert res.json()["font"]["family"] == "Inter"


def test_media(client):
    res = client.get("/api/v1/media", params={"path": "Sources/Tools/Hammer/Photos/h.jpg"})
    assert res.status_code == 200
    assert res.json()["data"].startswith("data:image/jpeg;base64,")

    assert client.get("/api/v1/media", params={"path": "../etc/passwd"}).status_code == 404


def test_chat_round_trip(client, app_dir):
    """Test that a chat turn stores both messages with product context"""
    hammer_path = str(app_dir / "Sources" / "Tools" / "Hammer")
    res = client.post("/api/v1/chat/message", json={"message": " Is it strong? ", "product_path": hammer_path})

    assert res.status_code == 200
    body = res.json()
    assert body["reply"] == "A fine hammer."
    assert [m["role"] for m in body["messages"]] == ["user", "assistant"]
    assert body["messages"][0]["message"] == "Is it strong?"
    assert body["messages"][0]["product_id"] == "Hammer"

    history = client.get("/api/v1/chat/history").json()
    assert [m["message"] for m in history] == ["Is it strong?", "A fine hammer."]

    assert client.delete("/api/v1/chat/history").json() == {"status": "cleared"}
    assert client.get("/api/v1/chat/history").json() == []


def test_chat_validation(client):
    assert client.post("/api/v1/chat/message", json={"message": ""}).status_code == 422


def test_chat_not_configured(client):
    app.dependency_overrides[get_assistant] = lambda: ProductAssistant(ApiKeys())
    res = client.post("/api/v1/chat/message", json={"message": "hi"})
    assert res.status_code == 503


def test_models(client):
    res = client.get("/api/v1/chat/models")
    body = res.json()
    assert body["configured"] is True
    assert {m["provider"] for m in body["available"]} == {"gemini"}

    assert client.put("/api/v1/chat/model", json={"model": "gemini-2.5-flash"}).json()["model"] == "gemini-2.5-flash"
    assert client.put("/api/v1/chat/model", json={"model": "bogus"}).status_code == 400


def test_voice(client):
    res = client.post("/api/v1/voice/transcribe", content=b"\x00" * 10)
    assert res.json() == {"success": True, "text": "10 bytes", "error": None}
    assert client.post("/api/v1/voice/transcribe", content=b"").json()["success"] is False
    assert client.get("/api/v1/voice/status").json()["available"] is True


class SlowStore(ChatHistoryStore):
    def get_history(self, limit=100):
        time.sleep(1.0)
        return super().get_history(limit)


def test_slow_chat_store_does_not_stall_other_requests(client):
    """Test that a slow history read runs off the event loop"""
    app.dependency_overrides[get_chat_store] = lambda: SlowStore(None)

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://kiosk") as ac:
            started = time.perf_counter()
            history = asyncio.create_task(ac.get("/api/v1/chat/history"))
            await asyncio.sleep(0.05)
            health = await ac.get("/healthz")
            health_latency = time.perf_counter() - started
            return health, health_latency, await history

    health, latency, history = asyncio.run(run())

    assert health.json() == {"ok": True}
    assert latency < 0.5
    assert history.status_code == 200
