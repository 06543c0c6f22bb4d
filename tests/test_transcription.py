"""
Unit tests for the speech-to-text wrapper
"""

import io
import wave

import speech_recognition as sr

from src.services.transcription import Transcriber


def _wav_bytes(seconds=0.2, rate=16000):
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(rate)
        wav.writeframes(b"\x00\x00" * int(rate * seconds))
    return buffer.getvalue()


class FakeRecognizer(sr.Recognizer):
    def __init__(self, outcome):
        super().__init__()
        self.outcome = outcome
        self.languages = []

    def recognize_google(self, audio_data, language="en-US", **kwargs):
        self.languages.append(language)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def test_transcribe_success():
    recognizer = FakeRecognizer("  show me the lamps ")
    result = Transcriber("de-DE", recognizer).transcribe(_wav_bytes())
    assert result.success
    assert result.text == "show me the lamps"
    assert recognizer.languages == ["de-DE"]


def test_transcribe_empty_payload():
    result = Transcriber(recognizer=FakeRecognizer("x")).transcribe(b"")
    assert not result.success
    assert result.error == "No audio data"


def test_transcribe_unreadable_audio():
    result = Transcriber(recognizer=FakeRecognizer("x")).transcribe(b"definitely not audio")
    assert not result.success
    assert result.error == "Unsupported audio format"


def test_transcribe_not_understood():
    result = Transcriber(recognizer=FakeRecognizer(sr.UnknownValueError())).transcribe(_wav_bytes())
    assert result.error == "Could not understand audio"


def test_transcribe_service_down():
    result = Transcriber(recognizer=FakeRecognizer(sr.RequestError("offline"))).transcribe(_wav_bytes())
    assert not result.success
    assert result.error.startswith("Speech service unavailable")


def test_status():
    assert Transcriber("en-GB", FakeRecognizer("")).status()["language"] == "en-GB"
