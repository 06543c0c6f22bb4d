import logging
from typing import Callable, Optional

import requests
import speech_recognition as sr

logger = logging.getLogger(__name__)


class AudioClient:
    """Microphone capture on the kiosk; transcription happens on the API server."""

    def __init__(self, transcribe_url: str):
        self.transcribe_url = transcribe_url

    def record(self, status_callback: Optional[Callable[[str], None]] = None) -> Optional[bytes]:
        """
        Record one phrase from the microphone and return it as WAV bytes.
        BLOCKING (call from a thread). None when nobody spoke.
        """
        r = sr.Recognizer()
        with sr.Microphone() as source:
            # Calibrate to room noise
            r.adjust_for_ambient_noise(source, duration=0.5)

            if status_callback:
                status_callback("Listening...")

            try:
                # Wait up to 5s for speech, record at most 10s
                audio = r.listen(source, timeout=5, phrase_time_limit=10)
            except sr.WaitTimeoutError:
                return None

        return audio.get_wav_data()

    def transcribe(self, wav_bytes: bytes) -> Optional[str]:
        """Send recorded audio to the server. None on any failure."""
        try:
            response = requests.post(
                self.transcribe_url,
                data=wav_bytes,
                headers={"Content-Type": "audio/wav"},
                timeout=30,
            )
            response.raise_for_status()
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Transcription request failed: {e}")
            return None

        if not result.get("success"):
            logger.info(f"Transcription failed: {result.get('error')}")
            return None
        return result.get("text")

    def listen(self, status_callback: Optional[Callable[[str], None]] = None) -> Optional[str]:
        """Record, then transcribe. BLOCKING."""
        wav_bytes = self.record(status_callback)
        if not wav_bytes:
            return None
        if status_callback:
            status_callback("Processing...")
        return self.transcribe(wav_bytes)
