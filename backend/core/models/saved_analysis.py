"""
A persisted analysis: one row of the saved_analyses table (or JSON store).
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from core.models.analysis import AnalysisResult


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SavedAnalysis:
    user_id: str
    analysis_name: str
    analysis_data: dict[str, Any]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=_now_iso)

    @property
    def result(self) -> AnalysisResult:
        return AnalysisResult.from_dict(self.analysis_data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "analysis_name": self.analysis_name,
            "analysis_data": dict(self.analysis_data),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SavedAnalysis":
        return cls(
            id=str(d["id"]),
            user_id=str(d["user_id"]),
            analysis_name=d.get("analysis_name") or "Analysis",
            analysis_data=d.get("analysis_data") or {},
            created_at=str(d.get("created_at") or _now_iso()),
        )
