# src/ingestion/naming.py
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

NAME_FILE = "name.txt"

_NUMERIC_PREFIX = re.compile(r"^\d+_+")
# Suffix must follow a separator so "Renew" keeps its "new"
_STATUS_SUFFIX = re.compile(r"[_-]+(done|todo|wip|draft|old|new|backup)$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[_-]")
_WHITESPACE = re.compile(r"\s+")


def clean_folder_name(folder_name: str) -> str:
    """
    Turn a folder name into a display name.

    "001_Widget_done" -> "Widget", "02_Running-Shoes" -> "Running Shoes".
    Applying it to its own output returns the same string.
    """
    cleaned = _NUMERIC_PREFIX.sub("", folder_name)
    cleaned = _STATUS_SUFFIX.sub("", cleaned)
    cleaned = _SEPARATORS.sub(" ", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned.strip())
    return cleaned or folder_name


def read_display_name(folder_path: str, folder_name: str) -> str:
    """name.txt if it exists and is not blank, else the cleaned folder name."""
    try:
        name = (Path(folder_path) / NAME_FILE).read_text(encoding="utf-8").strip()
        if name:
            return name
    except (OSError, UnicodeDecodeError):
        pass
    return clean_folder_name(folder_name)
