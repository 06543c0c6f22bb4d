# src/services/transcription.py
from __future__ import annotations
import io
import logging
from typing import Optional

import speech_recognition as sr
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class TranscriptionResult(BaseModel):
    success: bool
    text: Optional[str] = Field(None, description="Transcribed text when success is True")
    error: Optional[str] = Field(None, description="Reason when success is False")


class Transcriber:
    """
    Raw audio bytes (WAV, AIFF or FLAC) to text via speech_recognition.

    ``transcribe`` never raises: every failure comes back as an unsuccessful result.
    """

    def __init__(self, language: str = "en-US", recognizer: Optional[sr.Recognizer] = None):
        self.language = language
        self.recognizer = recognizer or sr.Recognizer()

    def status(self) -> dict:
        return {"available": True, "engine": "google", "language": self.language}

    def transcribe(self, audio_bytes: bytes) -> TranscriptionResult:
        if not audio_bytes:
            return TranscriptionResult(success=False, error="No audio data")

        try:
            with sr.AudioFile(io.BytesIO(audio_bytes)) as source:
                audio = self.recognizer.record(source)
        except (ValueError, EOFError, OSError) as e:
            logger.warning(f"Unreadable audio ({len(audio_bytes)} bytes): {e}")
            return TranscriptionResult(success=False, error="Unsupported audio format")

        try:
            text = self.recognizer.recognize_google(audio, language=self.language)
        except sr.UnknownValueError:
            return TranscriptionResult(success=False, error="Could not understand audio")
        except sr.RequestError as e:
            logger.error(f"STT request error: {e}")
            return TranscriptionResult(success=False, error=f"Speech service unavailable: {e}")

        text = (text or "").strip()
        if not text:
            return TranscriptionResult(success=False, error="Could not understand audio")
        return TranscriptionResult(success=True, text=text)
