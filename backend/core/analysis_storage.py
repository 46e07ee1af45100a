"""
Persistent saved-analysis history keyed by user_id.
- Backend: JSON file (data/saved_analyses.json) for local development.
- Optional: set ANALYSES_BACKEND=supabase and configure Supabase to use the saved_analyses table.
- Listing is newest first; a user can only read or delete their own analyses.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.config import (
    get_analyses_backend,
    get_saved_analyses_path,
    get_supabase_key,
    get_supabase_url,
)
from core.models.analysis import AnalysisResult
from core.models.saved_analysis import SavedAnalysis
from core.parsing.inci_parser import derive_analysis_name

logger = logging.getLogger(__name__)

SAVED_ANALYSES_TABLE = "saved_analyses"


def _newest_first(records: List[SavedAnalysis]) -> List[SavedAnalysis]:
    # Reverse insertion first so equal timestamps still list the latest save on top
    return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)


# Stores sharing a file share a lock, so separate instances on one path stay consistent
_PATH_LOCKS: Dict[str, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = _PATH_LOCKS[key] = threading.RLock()
        return lock


class JsonAnalysisStore:
    """
    File-backed store. Reads the whole file on every call; writes on save/delete.
    Layout: {"saved_analyses": {user_id: [record, ...]}, "version": "1.0"}.
    Load -> modify -> save runs under a per-path lock and the file is replaced
    atomically, so readers never see a half-written file.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = path or get_saved_analyses_path()
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _load_all(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
            return data.get("saved_analyses", {}) or {}
        except Exception as e:
            logger.warning("Failed to load saved analyses path=%s: %s", self._path, e)
            return {}

    def _save_all(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self._path.parent), prefix=f".{self._path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"saved_analyses": data, "version": "1.0"}, f, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def save(self, record: SavedAnalysis) -> SavedAnalysis:
        with self._lock:
            data = self._load_all()
            data.setdefault(record.user_id, []).append(record.to_dict())
            self._save_all(data)
        return record

    def list_for_user(self, user_id: str) -> List[SavedAnalysis]:
        with self._lock:
            rows = self._load_all().get(user_id, [])
        return _newest_first([SavedAnalysis.from_dict(r) for r in rows])

    def get(self, user_id: str, analysis_id: str) -> Optional[SavedAnalysis]:
        with self._lock:
            rows = self._load_all().get(user_id, [])
        for row in rows:
            if row.get("id") == analysis_id:
                return SavedAnalysis.from_dict(row)
        return None

    def delete(self, user_id: str, analysis_id: str) -> bool:
        with self._lock:
            data = self._load_all()
            rows = data.get(user_id, [])
            kept = [r for r in rows if r.get("id") != analysis_id]
            if len(kept) == len(rows):
                return False
            if kept:
                data[user_id] = kept
            else:
                data.pop(user_id, None)
            self._save_all(data)
        return True


class SupabaseAnalysisStore:
    """Store backed by the Supabase saved_analyses table (id, user_id, analysis_name, analysis_data, created_at)."""

    def __init__(self, client: Any, table: str = SAVED_ANALYSES_TABLE):
        self._client = client
        self._table = table

    def save(self, record: SavedAnalysis) -> SavedAnalysis:
        response = self._client.table(self._table).insert(record.to_dict()).execute()
        rows = response.data or []
        return SavedAnalysis.from_dict(rows[0]) if rows else record

    def list_for_user(self, user_id: str) -> List[SavedAnalysis]:
        response = (
            self._client.table(self._table)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [SavedAnalysis.from_dict(r) for r in response.data or []]

    def get(self, user_id: str, analysis_id: str) -> Optional[SavedAnalysis]:
        response = (
            self._client.table(self._table)
            .select("*")
            .eq("id", analysis_id)
            .eq("user_id", user_id)
            .execute()
        )
        rows = response.data or []
        return SavedAnalysis.from_dict(rows[0]) if rows else None

    def delete(self, user_id: str, analysis_id: str) -> bool:
        response = (
            self._client.table(self._table)
            .delete()
            .eq("id", analysis_id)
            .eq("user_id", user_id)
            .execute()
        )
        return bool(response.data)


def create_analysis_store(backend: Optional[str] = None):
    """Build the store selected by ANALYSES_BACKEND. Supabase without credentials falls back to JSON."""
    backend = backend or get_analyses_backend()
    if backend == "supabase":
        url, key = get_supabase_url(), get_supabase_key()
        if url and key:
            from supabase import create_client
            logger.info("ANALYSIS_STORE backend=supabase table=%s", SAVED_ANALYSES_TABLE)
            return SupabaseAnalysisStore(create_client(url, key))
        logger.warning("Supabase credentials not found in env. Saved analyses fall back to JSON file.")
    store = JsonAnalysisStore()
    logger.info("ANALYSIS_STORE backend=json path=%s", store.path)
    return store


_default_store = None


def get_analysis_store():
    global _default_store
    if _default_store is None:
        _default_store = create_analysis_store()
    return _default_store


def save_analysis(user_id: str, inci_text: str, result: AnalysisResult, store=None) -> SavedAnalysis:
    """Persist an analysis named after the first listed ingredient."""
    store = store or get_analysis_store()
    record = SavedAnalysis(
        user_id=user_id,
        analysis_name=derive_analysis_name(inci_text),
        analysis_data=result.to_dict(),
    )
    saved = store.save(record)
    logger.info(
        "ANALYSIS_SAVE user_id=%s id=%s name=%s score=%s",
        user_id, saved.id, saved.analysis_name, result.score,
    )
    return saved


def list_analyses(user_id: str, store=None) -> List[SavedAnalysis]:
    """Saved analyses for user_id, newest first."""
    store = store or get_analysis_store()
    return store.list_for_user(user_id)


def get_analysis(user_id: str, analysis_id: str, store=None) -> Optional[SavedAnalysis]:
    store = store or get_analysis_store()
    return store.get(user_id, analysis_id)


def delete_analysis(user_id: str, analysis_id: str, store=None) -> bool:
    """Delete one of user_id's analyses. Returns False if it does not exist for that user."""
    store = store or get_analysis_store()
    deleted = store.delete(user_id, analysis_id)
    logger.info("ANALYSIS_DELETE user_id=%s id=%s deleted=%s", user_id, analysis_id, deleted)
    return deleted
