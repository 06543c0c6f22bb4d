from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_settings
from config.config import Settings
from src.core.models import BrandingConfig
from src.ingestion.assets_loader import load_branding_config

router = APIRouter()

@router.get("", response_model=BrandingConfig, summary="Branding config (defaults when missing)")
async def get_branding(cfg: Settings = Depends(get_settings)):
    return await run_in_threadpool(load_branding_config, cfg.BRANDING_DIR)
