# frontend/api_client.py
import logging
from typing import List, Optional

import requests

from frontend.config import BRANDING_URL, CATALOG_URL, CHAT_URL, REQUEST_TIMEOUT
from src.core.models import Category, IdleConfig, Product

logger = logging.getLogger(__name__)


class KioskApiError(Exception):
    """The local API answered with an error or not at all."""


class KioskApiClient:
    """Thin wrapper over the local FastAPI service. All calls are BLOCKING."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _get(self, url: str, **params):
        try:
            res = self.session.get(url, params=params or None, timeout=REQUEST_TIMEOUT)
            res.raise_for_status()
            return res.json()
        except (requests.RequestException, ValueError) as e:
            raise KioskApiError(f"GET {url} failed: {e}") from e

    def _send(self, method: str, url: str, payload: Optional[dict] = None):
        try:
            res = self.session.request(method, url, json=payload, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise KioskApiError(f"{method} {url} failed: {e}") from e
        if res.status_code >= 400:
            try:
                detail = res.json().get("detail", res.text)
            except ValueError:
                detail = res.text
            raise KioskApiError(str(detail))
        return res.json()

    # --- catalog ---
    def categories(self, refresh: bool = False) -> List[Category]:
        data = self._get(CATALOG_URL, refresh=str(refresh).lower())
        return [Category.model_validate(c) for c in data.get("categories", [])]

    def company_info(self) -> Optional[Product]:
        data = self._get(f"{CATALOG_URL}/company")
        return Product.model_validate(data) if data else None

    def idle_config(self) -> IdleConfig:
        return IdleConfig.model_validate(self._get(f"{CATALOG_URL}/idle"))

    def branding(self) -> dict:
        return self._get(BRANDING_URL)

    # --- chat ---
    def send_chat(self, message: str, product_path: Optional[str] = None) -> str:
        data = self._send("POST", f"{CHAT_URL}/message", {"message": message, "product_path": product_path})
        return data["reply"]

    def clear_history(self) -> None:
        self._send("DELETE", f"{CHAT_URL}/history")

    def models(self) -> dict:
        return self._get(f"{CHAT_URL}/models")

    def select_model(self, model: str) -> dict:
        return self._send("PUT", f"{CHAT_URL}/model", {"model": model})
