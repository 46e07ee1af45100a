"""
ElevenLabs text-to-speech connector.
API key: https://elevenlabs.io/app/settings/api-keys
Synthesize: POST https://api.elevenlabs.io/v1/text-to-speech/{voice_id}  (xi-api-key header)
Single attempt; failures are reported with the provider's HTTP status, not retried.
"""
import logging
from typing import Optional

import requests

from core.config import (
    TTS_TIMEOUT,
    get_elevenlabs_api_key,
    get_elevenlabs_model_id,
    get_elevenlabs_voice_id,
)
from core.external_apis.base import SpeechResult

logger = logging.getLogger(__name__)

ELEVENLABS_TTS_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"

# ElevenLabs rejects very long single requests; summaries are far below this
MAX_TEXT_LENGTH = 5000


def synthesize_speech(
    text: str,
    voice_id: Optional[str] = None,
    api_key: Optional[str] = None,
    model_id: Optional[str] = None,
    timeout: Optional[int] = None,
) -> SpeechResult:
    """
    Convert text to MP3 audio. Returns SpeechResult with audio bytes on success,
    or error (and status_code when the provider answered) on failure.
    """
    api_key = get_elevenlabs_api_key() if api_key is None else api_key
    if not api_key:
        logger.debug("ELEVENLABS_TTS: skip, no api_key")
        return SpeechResult(None, "ELEVENLABS_API_KEY not set")
    if not text or not text.strip():
        return SpeechResult(None, "empty text")

    text = text.strip()
    if len(text) > MAX_TEXT_LENGTH:
        logger.warning("ELEVENLABS_TTS text truncated chars=%d max=%d", len(text), MAX_TEXT_LENGTH)
        text = text[:MAX_TEXT_LENGTH]

    voice = voice_id or get_elevenlabs_voice_id()
    url = ELEVENLABS_TTS_URL.format(voice_id=voice)
    payload = {
        "text": text,
        "model_id": model_id or get_elevenlabs_model_id(),
    }
    headers = {
        "xi-api-key": api_key,
        "Content-Type": "application/json",
        "Accept": "audio/mpeg",
    }
    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout or TTS_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("ELEVENLABS_TTS request failed voice=%s error=%s", voice, e)
        return SpeechResult(None, f"{type(e).__name__}: {e}")

    if resp.status_code != 200:
        detail = (resp.text or "")[:200]
        logger.warning("ELEVENLABS_TTS error status=%s voice=%s detail=%s", resp.status_code, voice, detail)
        return SpeechResult(None, f"TTS [{resp.status_code}]: {detail}", status_code=resp.status_code)

    audio = resp.content or b""
    logger.info("ELEVENLABS_TTS success voice=%s chars=%d bytes=%d", voice, len(payload["text"]), len(audio))
    return SpeechResult(
        audio,
        status_code=resp.status_code,
        content_type=resp.headers.get("Content-Type", "audio/mpeg"),
    )
