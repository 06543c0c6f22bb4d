from pydantic import BaseModel, Field
from typing import List, Optional

from src.core.models import Category

class CatalogResponse(BaseModel):
    """Scanned content tree"""
    categories: List[Category] = Field(default_factory=list, description="Top-level categories in folder order")

class LogoResponse(BaseModel):
    logo: Optional[str] = Field(None, description="Logo as a data URL, or null")

class MediaResponse(BaseModel):
    path: str
    data: str = Field(..., description="data: URL for images, file:// URL for videos")
