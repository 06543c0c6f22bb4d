# src/ingestion/sidecars.py
"""
Readers for the optional files that sit next to product media.

Every reader treats a missing or broken sidecar as absence: it logs and
returns an empty value instead of raising.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

CAPTIONS_FILE = "captions.txt"
DESCRIPTION_FILE = "product.docx"
AI_CONTEXT_FILE = "ai.txt"
THUMBNAIL_CANDIDATES = ("thumb.png", "thumb.jpg", "thumb.jpeg")

Caption = Dict[str, Optional[str]]


def parse_captions_file(captions_path: str) -> Dict[str, Caption]:
    """
    Parse a captions file.

    Format, one media file per line::

        filename|caption|description

    Lines with fewer than two fields are ignored; empty fields become None.
    """
    captions: Dict[str, Caption] = {}
    try:
        content = Path(captions_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No captions at {captions_path}: {e}")
        return captions

    for line in content.splitlines():
        if not line.strip():
            continue
        parts = [p.strip() for p in line.split("|")]
        if len(parts) < 2:
            continue
        filename, caption = parts[0], parts[1]
        description = parts[2] if len(parts) > 2 else ""
        captions[filename] = {
            "caption": caption or None,
            "description": description or None,
        }
    return captions


def load_captions(*candidate_paths: str) -> Dict[str, Caption]:
    """First captions file that exists wins."""
    for path in candidate_paths:
        if os.path.isfile(path):
            return parse_captions_file(path)
    return {}


def extract_docx_text(docx_path: str) -> str:
    """Paragraphs and table rows of a .docx, one per line. Empty string on any failure."""
    if not os.path.isfile(docx_path):
        return ""
    try:
        from docx import Document

        doc = Document(docx_path)
        lines: List[str] = [p.text.strip() for p in doc.paragraphs if p.text and p.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                lines.append(" | ".join(cell.text.strip() for cell in row.cells))
        return "\n".join(lines).strip()
    except Exception as e:
        logger.warning(f"Could not read {docx_path}: {e}")
        return ""


def read_ai_context(ai_txt_path: str) -> Optional[str]:
    try:
        text = Path(ai_txt_path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return text or None


def find_thumbnail(folder_path: str) -> Optional[str]:
    for filename in THUMBNAIL_CANDIDATES:
        candidate = os.path.join(folder_path, filename)
        if os.path.isfile(candidate) and os.access(candidate, os.R_OK):
            return os.path.abspath(candidate)
    return None
