from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
import logging

from api.dependencies import get_assistant, get_catalog_service, get_chat_store, get_settings
from api.schemas.chat import ChatRequest, ChatResponse, ModelSelectRequest, ModelsResponse
from config.config import Settings
from src.core.models import ChatMessage
from src.generation.assistant import AssistantError, AssistantNotConfiguredError, ProductAssistant
from src.services.catalog_service import CatalogService
from src.services.chat_store import ChatHistoryStore

router = APIRouter()
logger = logging.getLogger(__name__)

def _now() -> str:
    return datetime.now(timezone.utc).isoformat()

@router.post("/message", response_model=ChatResponse, summary="Ask the product assistant")
async def chat_endpoint(
    req: ChatRequest,
    assistant: ProductAssistant = Depends(get_assistant),
    store: ChatHistoryStore = Depends(get_chat_store),
    catalog: CatalogService = Depends(get_catalog_service),
    cfg: Settings = Depends(get_settings),
):
    product = await run_in_threadpool(catalog.find_product, req.product_path)
    history = await run_in_threadpool(store.get_history, cfg.CHAT_HISTORY_CONTEXT)

    context = {
        "product_id": product.id if product else None,
        "product_name": product.name if product else None,
        "category_path": product.path if product else None,
    }
    user_message = await run_in_threadpool(
        store.save_message,
        ChatMessage(timestamp=_now(), role="user", message=req.message.strip(), **context),
    )

    try:
        reply = await assistant.send(user_message.message, product, history)
    except AssistantNotConfiguredError as e:
        logger.warning(f"Chat unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))
    except AssistantError as e:
        logger.error(f"Chat error: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=str(e))

    assistant_message = await run_in_threadpool(
        store.save_message,
        ChatMessage(timestamp=_now(), role="assistant", message=reply, **context),
    )
    return ChatResponse(reply=reply, messages=[user_message, assistant_message])

@router.get("/history", response_model=List[ChatMessage], summary="Last N chat messages")
async def chat_history(
    limit: int = Query(100, ge=1, le=1000),
    store: ChatHistoryStore = Depends(get_chat_store),
):
    return await run_in_threadpool(store.get_history, limit)

@router.delete("/history", summary="Clear chat history")
async def clear_history(store: ChatHistoryStore = Depends(get_chat_store)):
    await run_in_threadpool(store.clear)
    return {"status": "cleared"}

@router.get("/models", response_model=ModelsResponse, summary="Models usable with the loaded API keys")
async def list_models(assistant: ProductAssistant = Depends(get_assistant)):
    return ModelsResponse(
        provider=assistant.provider,
        model=assistant.model,
        configured=assistant.is_configured,
        available=[m.model_dump() for m in assistant.available_models()],
    )

@router.put("/model", response_model=ModelsResponse, summary="Switch the assistant model")
async def select_model(req: ModelSelectRequest, assistant: ProductAssistant = Depends(get_assistant)):
    try:
        assistant.set_model(req.model)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await list_models(assistant)
