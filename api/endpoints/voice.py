from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
import logging

from api.dependencies import get_transcriber
from src.services.transcription import Transcriber, TranscriptionResult

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/status", summary="Speech-to-text availability")
async def voice_status(transcriber: Transcriber = Depends(get_transcriber)):
    return transcriber.status()

@router.post("/transcribe", response_model=TranscriptionResult, summary="Transcribe raw WAV/AIFF/FLAC bytes")
async def transcribe(request: Request, transcriber: Transcriber = Depends(get_transcriber)):
    audio_bytes = await request.body()
    result = await run_in_threadpool(transcriber.transcribe, audio_bytes)
    if not result.success:
        logger.info(f"Transcription failed: {result.error}")
    return result
