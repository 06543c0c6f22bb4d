from pydantic import BaseModel, Field
from typing import Optional, List

from src.core.models import ChatMessage

class ChatRequest(BaseModel):
    """Request model for the chat endpoint"""
    message: str = Field(..., min_length=1, description="Visitor's question or message")
    product_path: Optional[str] = Field(
        None,
        description="Folder path of the product on screen. If not provided, the assistant answers from the home screen."
    )

class ChatResponse(BaseModel):
    """Response model for the chat endpoint"""
    reply: str = Field(..., description="Assistant's answer")
    messages: List[ChatMessage] = Field(
        default_factory=list,
        description="The stored user and assistant messages, in order"
    )

class ModelSelectRequest(BaseModel):
    model: str = Field(..., description="One of the models listed by GET /chat/models")

class ModelsResponse(BaseModel):
    provider: str
    model: str
    configured: bool
    available: List[dict] = Field(default_factory=list)
