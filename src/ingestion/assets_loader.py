# src/ingestion/assets_loader.py
"""Branding, idle screen, company logo and media payloads for the kiosk UI."""
from __future__ import annotations

import base64
import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from src.core.models import BrandingConfig, IdleConfig
from src.ingestion.scanner import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS

logger = logging.getLogger(__name__)

BRANDING_FILE = "config.json"
IDLE_VIDEO_FILE = "idle.mp4"
IDLE_TIME_FILE = "idle_time.txt"
DEFAULT_IDLE_TIMEOUT = 60  # seconds
LOGO_CANDIDATES = ("logo.png", "logo.jpg", "logo.jpeg")


class MediaLoadError(Exception):
    """Raised when a media file cannot be served."""


def default_branding() -> BrandingConfig:
    return BrandingConfig(
        background={"type": "color", "value": "#0A0E1A"},
        colors={
            "primary": "#0066FF",
            "primaryHover": "#0052CC",
            "bgPrimary": "#0A0E1A",
            "bgSecondary": "#151B2D",
            "textPrimary": "#FFFFFF",
            "textSecondary": "#B0B8CC",
        },
        font={
            "family": "Inter",
            "url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
        },
    )


def _image_mime(filename: str) -> str:
    return "image/png" if filename.lower().endswith(".png") else "image/jpeg"


def _data_url(file_path: str, mime_type: str) -> str:
    data = Path(file_path).read_bytes()
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def load_branding_config(branding_path: str) -> BrandingConfig:
    """
    Read Branding/config.json.

    The file is taken as a whole; a missing or malformed file gives the default branding.
    Logo and background images are inlined as data URLs when they can be read.
    """
    config_path = os.path.join(branding_path, BRANDING_FILE)
    try:
        with open(config_path, encoding="utf-8") as f:
            config = BrandingConfig.model_validate(json.load(f))
    except (OSError, ValueError, ValidationError) as e:
        logger.warning(f"Error loading branding config {config_path}: {e}")
        return default_branding()

    if config.logo:
        try:
            config.logo_data = _data_url(os.path.join(branding_path, config.logo), _image_mime(config.logo))
        except OSError as e:
            logger.error(f"Error loading logo: {e}")

    if config.background and config.background.type == "image" and config.background.value:
        try:
            config.background_data = _data_url(
                os.path.join(branding_path, config.background.value),
                _image_mime(config.background.value),
            )
        except OSError as e:
            logger.error(f"Error loading background image: {e}")

    return config


def load_idle_config(sources_path: str) -> IdleConfig:
    """Sources/ASSETS/Idle: idle.mp4 and idle_time.txt (seconds)."""
    idle_folder = os.path.join(sources_path, "ASSETS", "Idle")

    video_path = None
    video_file = os.path.join(idle_folder, IDLE_VIDEO_FILE)
    if os.path.isfile(video_file):
        video_path = "file://" + os.path.abspath(video_file).replace("\\", "/")
        logger.info(f"Idle video found: {video_file}")
    else:
        logger.info(f"No {IDLE_VIDEO_FILE} found in {idle_folder}")

    timeout = DEFAULT_IDLE_TIMEOUT
    try:
        parsed = int(Path(idle_folder, IDLE_TIME_FILE).read_text(encoding="utf-8").strip())
        if parsed > 0:
            timeout = parsed
            logger.info(f"Idle timeout loaded: {timeout} seconds")
    except (OSError, ValueError):
        logger.info(f"No usable {IDLE_TIME_FILE}, using default timeout: {DEFAULT_IDLE_TIMEOUT}")

    return IdleConfig(video_path=video_path, timeout_seconds=timeout)


def load_company_logo(assets_path: str) -> Optional[str]:
    """logo.png/jpg/jpeg from the given folder as a data URL."""
    for filename in LOGO_CANDIDATES:
        logo_path = os.path.join(assets_path, filename)
        try:
            data_url = _data_url(logo_path, _image_mime(filename))
        except OSError:
            continue
        logger.info(f"Company logo loaded: {logo_path}")
        return data_url

    logger.info(f"No company logo found in {assets_path}")
    return None


def load_media_file(app_path: str, relative_path: str) -> str:
    """
    A media file under the app folder, ready for display.

    Images come back as base64 data URLs, videos as file:// URLs.

    Raises:
        MediaLoadError: the path leaves the app folder or cannot be read.
    """
    base = os.path.realpath(app_path)
    full_path = os.path.realpath(os.path.join(base, relative_path))
    if os.path.commonpath([base, full_path]) != base:
        raise MediaLoadError(f"Path outside app folder: {relative_path}")
    if not os.path.isfile(full_path):
        raise MediaLoadError(f"Media file not found: {relative_path}")

    ext = os.path.splitext(full_path)[1].lower()
    if ext in VIDEO_EXTENSIONS:
        return "file://" + full_path.replace("\\", "/")

    if ext in IMAGE_EXTENSIONS:
        mime_type = "image/jpeg" if ext == ".jpg" else f"image/{ext[1:]}"
    else:
        mime_type = "application/octet-stream"

    try:
        return _data_url(full_path, mime_type)
    except OSError as e:
        logger.error(f"Error loading media file {full_path}: {e}")
        raise MediaLoadError(str(e)) from e
