"""
Structured INCI analysis result. Single format for the API and saved analyses.
to_dict() uses the field names the frontend reads (maxScore, hairNeeds).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MAX_SCORE = 10
FRONT_LOAD_COUNT = 5  # first five INCI positions make up ~80-90% of a formula


class IngredientCategory(str, Enum):
    REWARD = "reward"
    DISQUALIFIER = "disqualifier"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ParsedIngredient:
    name: str
    position: int
    category: IngredientCategory
    points: float
    note: str

    @property
    def front_loaded(self) -> bool:
        return self.position <= FRONT_LOAD_COUNT

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "category": self.category.value,
            "points": self.points,
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ParsedIngredient":
        return cls(
            name=d["name"],
            position=int(d["position"]),
            category=IngredientCategory(d.get("category", "neutral")),
            points=float(d.get("points", 0.0)),
            note=d.get("note", ""),
        )


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    max_score: int = MAX_SCORE
    ingredients: tuple[ParsedIngredient, ...] = field(default_factory=tuple)
    summary: str = ""
    hair_needs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def disqualifier_count(self) -> int:
        return sum(1 for i in self.ingredients if i.category is IngredientCategory.DISQUALIFIER)

    @property
    def reward_count(self) -> int:
        return sum(1 for i in self.ingredients if i.category is IngredientCategory.REWARD)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "summary": self.summary,
            "hairNeeds": list(self.hair_needs),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "AnalysisResult":
        return cls(
            score=int(d.get("score", 0)),
            max_score=int(d.get("maxScore", MAX_SCORE)),
            ingredients=tuple(ParsedIngredient.from_dict(i) for i in d.get("ingredients", []) or []),
            summary=d.get("summary", ""),
            hair_needs=tuple(d.get("hairNeeds", []) or []),
        )
