"""
Unit tests for the ElevenLabs text-to-speech connector (mocked).
Run from backend: python -m pytest tests/test_external_apis.py -v
"""
from unittest.mock import patch, MagicMock

import requests


def test_tts_no_key_makes_no_request():
    """Without API key, TTS returns an error and never calls the provider."""
    from core.external_apis.elevenlabs_tts import synthesize_speech
    with patch("core.external_apis.elevenlabs_tts.requests.post") as mock_post:
        res = synthesize_speech("Score: 4/10.", api_key="")
    mock_post.assert_not_called()
    assert res.audio is None
    assert "ELEVENLABS_API_KEY" in res.error
    assert res.status_code is None


def test_tts_empty_text():
    from core.external_apis.elevenlabs_tts import synthesize_speech
    with patch("core.external_apis.elevenlabs_tts.requests.post") as mock_post:
        res = synthesize_speech("   ", api_key="test-key")
    mock_post.assert_not_called()
    assert not res.ok


@patch("core.external_apis.elevenlabs_tts.requests.post")
def test_tts_mock_success(mock_post):
    """Audio bytes are returned and the request targets the voice endpoint."""
    from core.external_apis.elevenlabs_tts import synthesize_speech
    mock_post.return_value = MagicMock(
        status_code=200,
        content=b"ID3fakeaudio",
        headers={"Content-Type": "audio/mpeg"},
    )
    res = synthesize_speech("Score: 8/10.", voice_id="voice123", api_key="test-key", model_id="m1")
    assert res.ok
    assert res.audio == b"ID3fakeaudio"
    assert res.content_type == "audio/mpeg"
    args, kwargs = mock_post.call_args
    assert args[0] == "https://api.elevenlabs.io/v1/text-to-speech/voice123"
    assert kwargs["headers"]["xi-api-key"] == "test-key"
    assert kwargs["json"] == {"text": "Score: 8/10.", "model_id": "m1"}


@patch("core.external_apis.elevenlabs_tts.requests.post")
def test_tts_http_error_surfaces_status(mock_post):
    from core.external_apis.elevenlabs_tts import synthesize_speech
    mock_post.return_value = MagicMock(status_code=401, text="invalid api key", content=b"")
    res = synthesize_speech("hello", api_key="bad-key")
    assert not res.ok
    assert res.status_code == 401
    assert "401" in res.error
    assert mock_post.call_count == 1


@patch("core.external_apis.elevenlabs_tts.requests.post")
def test_tts_connection_error(mock_post):
    from core.external_apis.elevenlabs_tts import synthesize_speech
    mock_post.side_effect = requests.ConnectionError("boom")
    res = synthesize_speech("hello", api_key="test-key")
    assert not res.ok
    assert res.error.startswith("ConnectionError")
    assert mock_post.call_count == 1


@patch("core.external_apis.elevenlabs_tts.requests.post")
def test_tts_uses_env_defaults(mock_post, monkeypatch):
    from core.external_apis.elevenlabs_tts import synthesize_speech
    monkeypatch.setenv("ELEVENLABS_API_KEY", "env-key")
    monkeypatch.setenv("ELEVENLABS_VOICE_ID", "envvoice")
    mock_post.return_value = MagicMock(status_code=200, content=b"x", headers={})
    res = synthesize_speech("hello")
    assert res.ok
    args, kwargs = mock_post.call_args
    assert args[0].endswith("/envvoice")
    assert kwargs["headers"]["xi-api-key"] == "env-key"


@patch("core.external_apis.elevenlabs_tts.requests.post")
def test_tts_long_text_is_truncated_with_warning(mock_post, caplog):
    import logging
    from core.external_apis.elevenlabs_tts import MAX_TEXT_LENGTH, synthesize_speech
    mock_post.return_value = MagicMock(status_code=200, content=b"x", headers={})
    with caplog.at_level(logging.WARNING, logger="core.external_apis.elevenlabs_tts"):
        res = synthesize_speech("a" * (MAX_TEXT_LENGTH + 10), api_key="test-key")
    assert res.ok
    assert len(mock_post.call_args.kwargs["json"]["text"]) == MAX_TEXT_LENGTH
    assert "text truncated" in caplog.text
    assert f"chars={MAX_TEXT_LENGTH + 10}" in caplog.text
