"""
Paths, storage backend selection, and TTS settings.
All resolution relative to the backend directory.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Repo root: backend/core/config.py -> parent=core, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

# --- Data paths ---
def get_data_dir() -> Path:
    return _REPO_ROOT / "data"

def get_saved_analyses_path() -> Path:
    override = os.environ.get("SAVED_ANALYSES_PATH", "").strip()
    if override:
        return Path(override)
    return get_data_dir() / "saved_analyses.json"

def get_knowledge_base_export_path() -> Path:
    return get_data_dir() / "knowledge_base.json"

# --- Saved analyses backend ---
ANALYSES_BACKENDS = ("json", "supabase")

def get_analyses_backend() -> str:
    backend = os.environ.get("ANALYSES_BACKEND", "json").lower().strip()
    if backend not in ANALYSES_BACKENDS:
        logger.warning("CONFIG unknown ANALYSES_BACKEND=%s, using json", backend)
        return "json"
    return backend

def get_supabase_url() -> str:
    return (os.environ.get("SUPABASE_URL") or os.environ.get("NEXT_PUBLIC_SUPABASE_URL") or "").strip()

def get_supabase_key() -> str:
    return (os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or os.environ.get("SUPABASE_ANON_KEY") or "").strip()

# --- Text-to-speech (ElevenLabs, lazy read from env) ---
def get_elevenlabs_api_key() -> str:
    return os.environ.get("ELEVENLABS_API_KEY", "").strip()

def get_elevenlabs_voice_id() -> str:
    return os.environ.get("ELEVENLABS_VOICE_ID", "EXAVITQu4vr4xnSDxMaL").strip()

def get_elevenlabs_model_id() -> str:
    return os.environ.get("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2").strip()

def get_tts_enabled() -> bool:
    return bool(get_elevenlabs_api_key())

# TTS request timeout (seconds)
TTS_TIMEOUT = int(os.environ.get("TTS_TIMEOUT", "30"))

# --- Logging ---
def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()

# --- Startup logging ---
def log_config() -> None:
    logger.info(
        "CONFIG: analyses_backend=%s saved_analyses=%s supabase_url=%s supabase_key=%s "
        "tts_enabled=%s tts_voice=%s tts_model=%s tts_timeout=%ds",
        get_analyses_backend(), get_saved_analyses_path(),
        bool(get_supabase_url()), bool(get_supabase_key()),
        get_tts_enabled(), get_elevenlabs_voice_id(), get_elevenlabs_model_id(),
        TTS_TIMEOUT,
    )
