from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


class MediaFile(BaseModel):
    """
    A single image or video inside a product gallery.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="'<product folder>-<index>'")
    type: Literal["image", "video"]
    filename: str
    path: str = Field(..., description="Absolute path on disk")
    caption: Optional[str] = Field(None, description="Short caption from captions.txt")
    description: Optional[str] = Field(None, description="Longer text from captions.txt")


class Product(BaseModel):
    """
    A leaf of the catalog tree: a folder holding an ordered media gallery.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Folder name")
    name: str = Field(..., description="Display name (name.txt or cleaned folder name)")
    path: str
    media: List[MediaFile] = Field(default_factory=list)
    description: str = Field("", description="Text extracted from product.docx")
    ai_context: Optional[str] = Field(None, description="Contents of ai.txt")
    thumbnail: Optional[str] = Field(None, description="Absolute path of thumb.png/jpg")

    @property
    def image_count(self) -> int:
        return sum(1 for m in self.media if m.type == "image")

    @property
    def video_count(self) -> int:
        return sum(1 for m in self.media if m.type == "video")


class Category(BaseModel):
    """
    A catalog node grouping subcategories and/or products. Never empty once scanned.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Folder name")
    name: str
    path: str
    subcategories: List["Category"] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    thumbnail: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.subcategories and not self.products

    def has_child_category(self, category_id: str) -> bool:
        return any(sub.id == category_id for sub in self.subcategories)


Category.model_rebuild()


# --- BRANDING ---

class BrandingBackground(BaseModel):
    type: Literal["color", "image"] = "color"
    value: str


class BrandingColors(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary: Optional[str] = None
    primary_hover: Optional[str] = Field(None, alias="primaryHover")
    bg_primary: Optional[str] = Field(None, alias="bgPrimary")
    bg_secondary: Optional[str] = Field(None, alias="bgSecondary")
    text_primary: Optional[str] = Field(None, alias="textPrimary")
    text_secondary: Optional[str] = Field(None, alias="textSecondary")


class BrandingFont(BaseModel):
    family: Optional[str] = None
    url: Optional[str] = None


class BrandingConfig(BaseModel):
    """
    Branding/config.json. Keys on disk are camelCase, as the kiosk designers write them.
    """
    model_config = ConfigDict(populate_by_name=True)

    logo: Optional[str] = Field(None, description="Logo filename relative to the branding folder")
    logo_data: Optional[str] = Field(None, alias="logoData", description="Logo as a data URL")
    background: Optional[BrandingBackground] = None
    background_data: Optional[str] = Field(None, alias="backgroundData")
    colors: Optional[BrandingColors] = None
    font: Optional[BrandingFont] = None


class IdleConfig(BaseModel):
    video_path: Optional[str] = Field(None, description="file:// URL of ASSETS/Idle/idle.mp4")
    timeout_seconds: int = Field(60, gt=0)


# --- CHAT ---

class ChatMessage(BaseModel):
    id: Optional[int] = None
    timestamp: str = Field(..., description="ISO-8601 timestamp")
    role: Literal["user", "assistant"]
    message: str
    product_id: Optional[str] = None
    product_name: Optional[str] = None
    category_path: Optional[str] = None


class ApiKeys(BaseModel):
    openai: Optional[str] = None
    gemini: Optional[str] = None
