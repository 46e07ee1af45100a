"""
Outbound connectors. ElevenLabs text-to-speech reads analysis summaries aloud.
"""
from .base import SpeechResult
from .elevenlabs_tts import synthesize_speech

__all__ = [
    "SpeechResult",
    "synthesize_speech",
]
