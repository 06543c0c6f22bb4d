# frontend/assets.py
import logging
import os
from typing import Dict, Optional, Tuple

import customtkinter as ctk
from PIL import Image, ImageOps

logger = logging.getLogger(__name__)


class AssetsManager:
    """Loads product pictures from disk as CTkImages, once per (path, size)."""

    def __init__(self):
        self._cache: Dict[Tuple[str, Tuple[int, int], bool], ctk.CTkImage] = {}

    def image(self, path: Optional[str], size: Tuple[int, int], fit: bool = False) -> Optional[ctk.CTkImage]:
        """
        ``fit=True`` letterboxes the picture inside ``size`` (carousel);
        otherwise it is cropped to fill it (tiles).
        """
        if not path or not os.path.isfile(path):
            return None
        key = (path, size, fit)
        if key in self._cache:
            return self._cache[key]
        try:
            with Image.open(path) as img:
                img = img.convert("RGB")
                if fit:
                    img.thumbnail(size)
                    shown = img.size
                else:
                    img = ImageOps.fit(img, size)
                    shown = size
                ctk_img = ctk.CTkImage(light_image=img.copy(), size=shown)
        except OSError as e:
            logger.warning(f"Could not load image {path}: {e}")
            return None
        self._cache[key] = ctk_img
        return ctk_img

    def clear(self) -> None:
        self._cache.clear()


# Singleton instance
assets = AssetsManager()
