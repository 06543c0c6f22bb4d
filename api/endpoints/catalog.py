from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
import logging

from api.dependencies import get_catalog_service
from api.schemas.catalog import CatalogResponse, LogoResponse
from src.core.models import IdleConfig, Product
from src.services.catalog_service import CatalogService

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=CatalogResponse, summary="Scanned category tree")
async def get_catalog(refresh: bool = False, catalog: CatalogService = Depends(get_catalog_service)):
    try:
        categories = await run_in_threadpool(catalog.categories, refresh)
        return CatalogResponse(categories=categories)
    except Exception as e:
        logger.error(f"Error scanning content folders: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/company", response_model=Optional[Product], summary="Company product shown after idle")
async def get_company_info(catalog: CatalogService = Depends(get_catalog_service)):
    try:
        return await run_in_threadpool(catalog.company_info)
    except Exception as e:
        logger.error(f"Error loading company info: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/company/logo", response_model=LogoResponse, summary="Company logo")
async def get_company_logo(catalog: CatalogService = Depends(get_catalog_service)):
    try:
        return LogoResponse(logo=await run_in_threadpool(catalog.company_logo))
    except Exception as e:
        logger.error(f"Error loading company logo: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/idle", response_model=IdleConfig, summary="Idle video and timeout")
async def get_idle_config(catalog: CatalogService = Depends(get_catalog_service)):
    return await run_in_threadpool(catalog.idle_config)
