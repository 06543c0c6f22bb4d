# src/ingestion/scanner.py
"""
Turns the Sources folder into a Category/Product tree.

Layout::

    Sources/<Category>/<Subcategory|Product>/...

A folder is classified as exactly one of Product, Category or nothing:

1. a ``Photos`` subfolder holding media makes it a Product;
2. otherwise its child folders are classified, and any surviving child makes it a Category;
3. otherwise media directly inside it (thumbnails excluded) make it a Product;
4. otherwise it is pruned.

Listing order is the filesystem's; nothing is sorted.
"""
from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple, Union

from src.core.models import Category, MediaFile, Product
from src.ingestion.naming import read_display_name
from src.ingestion.sidecars import (
    AI_CONTEXT_FILE,
    CAPTIONS_FILE,
    DESCRIPTION_FILE,
    THUMBNAIL_CANDIDATES,
    Caption,
    extract_docx_text,
    find_thumbnail,
    load_captions,
    read_ai_context,
)

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")
VIDEO_EXTENSIONS = (".mp4", ".webm", ".mov", ".avi")

MEDIA_SUBFOLDER = "Photos"
# Never categories or products, at any depth
SKIP_FOLDERS = frozenset({"Photos", "ASSETS", "Idle", "Videos", "Images", "CEGINFO"})

DEFAULT_MAX_DEPTH = 16

Node = Union[Product, Category]


def is_media_file(filename: str) -> bool:
    ext = os.path.splitext(filename)[1].lower()
    return ext in IMAGE_EXTENSIONS or ext in VIDEO_EXTENSIONS


def get_media_type(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return "video" if ext in VIDEO_EXTENSIONS else "image"


def collect_media_files(folder_path: str, exclude: Tuple[str, ...] = ()) -> List[str]:
    """Media files directly inside a folder (not recursive), in listing order."""
    media_files: List[str] = []
    try:
        with os.scandir(folder_path) as entries:
            for entry in entries:
                if entry.name.lower() in exclude:
                    continue
                if entry.is_file() and is_media_file(entry.name):
                    media_files.append(os.path.abspath(entry.path))
    except OSError as e:
        logger.error(f"Error collecting media files from {folder_path}: {e}")
    return media_files


def _build_product(folder_path: str, folder_name: str, media_paths: List[str], captions: dict[str, Caption]) -> Product:
    media = []
    for index, full_path in enumerate(media_paths):
        filename = os.path.basename(full_path)
        caption = captions.get(filename, {})
        media.append(MediaFile(
            id=f"{folder_name}-{index}",
            type=get_media_type(filename),
            filename=filename,
            path=full_path,
            caption=caption.get("caption"),
            description=caption.get("description"),
        ))

    return Product(
        id=folder_name,
        name=read_display_name(folder_path, folder_name),
        path=os.path.abspath(folder_path),
        media=media,
        description=extract_docx_text(os.path.join(folder_path, DESCRIPTION_FILE)),
        ai_context=read_ai_context(os.path.join(folder_path, AI_CONTEXT_FILE)),
        thumbnail=find_thumbnail(folder_path),
    )


def scan_product_folder(folder_path: str, folder_name: str) -> Optional[Product]:
    """Product from a ``Photos`` media subfolder, or None."""
    photos_path = os.path.join(folder_path, MEDIA_SUBFOLDER)
    if not os.path.isdir(photos_path):
        return None

    media_paths = collect_media_files(photos_path)
    if not media_paths:
        return None

    captions = load_captions(
        os.path.join(photos_path, CAPTIONS_FILE),
        os.path.join(folder_path, CAPTIONS_FILE),
    )
    return _build_product(folder_path, folder_name, media_paths, captions)


def scan_direct_product(folder_path: str, folder_name: str) -> Optional[Product]:
    """Product from media sitting directly in the folder, or None."""
    media_paths = collect_media_files(folder_path, exclude=THUMBNAIL_CANDIDATES)
    if not media_paths:
        return None

    captions = load_captions(os.path.join(folder_path, CAPTIONS_FILE))
    return _build_product(folder_path, folder_name, media_paths, captions)


def classify_folder(folder_path: str, folder_name: str, depth: int = 1,
                    max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[Node]:
    if depth > max_depth:
        logger.warning(f"Skipping {folder_path}: deeper than {max_depth} levels")
        return None

    product = scan_product_folder(folder_path, folder_name)
    if product:
        return product

    category = scan_category_folder(folder_path, folder_name, depth=depth, max_depth=max_depth)
    if category:
        return category

    return scan_direct_product(folder_path, folder_name)


def scan_category_folder(folder_path: str, folder_name: str, depth: int = 1,
                         max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[Category]:
    """
    Classify every child folder and wrap the survivors in a Category.

    Returns None when nothing survives, or when the folder cannot be listed.
    """
    try:
        names = os.listdir(folder_path)
    except OSError as e:
        logger.error(f"Error scanning category folder {folder_path}: {e}")
        return None

    subcategories: List[Category] = []
    products: List[Product] = []

    for name in names:
        if name in SKIP_FOLDERS:
            continue
        full_path = os.path.join(folder_path, name)
        if not os.path.isdir(full_path):
            continue

        node = classify_folder(full_path, name, depth=depth + 1, max_depth=max_depth)
        if isinstance(node, Product):
            products.append(node)
        elif isinstance(node, Category):
            subcategories.append(node)

    if not subcategories and not products:
        return None

    return Category(
        id=folder_name,
        name=read_display_name(folder_path, folder_name),
        path=os.path.abspath(folder_path),
        subcategories=subcategories,
        products=products,
        thumbnail=find_thumbnail(folder_path),
    )


def scan_sources_folder(sources_path: str, max_depth: int = DEFAULT_MAX_DEPTH) -> List[Category]:
    """
    Scan the Sources folder and return the top-level categories.

    A missing or unreadable Sources folder yields an empty list.
    """
    try:
        names = os.listdir(sources_path)
    except OSError as e:
        logger.error(f"Error scanning Sources folder {sources_path}: {e}")
        return []

    categories: List[Category] = []
    for name in names:
        if name in SKIP_FOLDERS:
            continue
        full_path = os.path.join(sources_path, name)
        if not os.path.isdir(full_path):
            continue
        category = scan_category_folder(full_path, name, depth=1, max_depth=max_depth)
        if category:
            categories.append(category)

    logger.info(f"Scanned {sources_path}: {len(categories)} top-level categories")
    return categories


def load_company_info(company_info_path: str) -> Optional[Product]:
    """
    The CompanyInfo folder, read with the product rules.

    Expects name.txt and a Photos/ folder (or media directly inside).
    """
    folder_name = os.path.basename(os.path.normpath(company_info_path))
    if not os.path.isdir(company_info_path):
        logger.info(f"No company info found at: {company_info_path}")
        return None

    product = scan_product_folder(company_info_path, folder_name) or scan_direct_product(company_info_path, folder_name)
    if product:
        logger.info(f"Company info loaded: {product.name} with {len(product.media)} media files")
    else:
        logger.info(f"No company media found at: {company_info_path}")
    return product
