from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
import logging

from api.dependencies import get_settings
from api.schemas.catalog import MediaResponse
from config.config import Settings
from src.ingestion.assets_loader import MediaLoadError, load_media_file

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=MediaResponse, summary="Load a media file as a data/file URL")
async def get_media(
    path: str = Query(..., min_length=1, description="Path relative to the app folder"),
    cfg: Settings = Depends(get_settings),
):
    try:
        data = await run_in_threadpool(load_media_file, cfg.APP_DIR, path)
        return MediaResponse(path=path, data=data)
    except MediaLoadError as e:
        logger.warning(f"Error loading media: {e}")
        raise HTTPException(status_code=404, detail=str(e))
