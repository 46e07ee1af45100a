"""
Types for outbound speech-synthesis calls.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class SpeechResult:
    """Result of a text-to-speech request. Exactly one of audio / error is set."""
    audio: Optional[bytes]
    error: Optional[str] = None
    status_code: Optional[int] = None  # provider HTTP status, None when no request was made
    content_type: str = "audio/mpeg"

    @property
    def ok(self) -> bool:
        return self.audio is not None and self.error is None
