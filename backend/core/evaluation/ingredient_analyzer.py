"""
Deterministic INCI scoring engine. Pure: no I/O, no shared mutable state.
Pipeline: tokenize -> classify (disqualifier, then reward, else neutral) with
front-load weighting -> clamp score -> derive hair needs and summary.
"""
import logging
import math
from typing import List, Optional

from core.evaluation.hair_needs import finalize_needs, needs_for
from core.models.analysis import (
    FRONT_LOAD_COUNT,
    MAX_SCORE,
    AnalysisResult,
    IngredientCategory,
    ParsedIngredient,
)
from core.ontology.knowledge_base import DEFAULT_KNOWLEDGE_BASE, IngredientKnowledgeBase
from core.parsing.inci_parser import split_inci
from core.summary_composer import NO_INGREDIENTS_SUMMARY, compose_summary

logger = logging.getLogger(__name__)

# Scoring policy
BASE_POINTS = 5.0  # midpoint prior: an all-neutral list scores 5/10
POINTS_PER_MATCH = 2.0
FRONT_LOAD_MULTIPLIER = 1.5
MIN_SCORE = 0
NEUTRAL_NOTE = "Standard cosmetic ingredient"

EXAMPLE_INCI = (
    "Water, Sodium Laureth Sulfate, Cocamidopropyl Betaine, Glycerin, Panthenol, "
    "Dimethicone, Fragrance, Citric Acid, Sodium Chloride, Methylparaben"
)


def position_multiplier(position: int) -> float:
    """1.5 for the first five declared ingredients, 1.0 after."""
    return FRONT_LOAD_MULTIPLIER if position <= FRONT_LOAD_COUNT else 1.0


def clamp_score(total_points: float) -> int:
    # Half-up rounding; Python's round() would send 4.5 to 4
    rounded = math.floor(total_points + 0.5)
    return max(MIN_SCORE, min(MAX_SCORE, rounded))


class IngredientAnalyzer:
    """
    Scores an INCI list against a knowledge base.
    Disqualifier match short-circuits the reward check, so a token can never be both.
    """

    def __init__(self, knowledge_base: Optional[IngredientKnowledgeBase] = None):
        # An empty knowledge base is falsy (__len__), so test identity
        self._kb = DEFAULT_KNOWLEDGE_BASE if knowledge_base is None else knowledge_base

    @property
    def knowledge_base(self) -> IngredientKnowledgeBase:
        return self._kb

    def classify(self, token: str, position: int) -> ParsedIngredient:
        multiplier = position_multiplier(position)

        disq = self._kb.match_disqualifier(token)
        if disq is not None:
            return ParsedIngredient(
                name=token,
                position=position,
                category=IngredientCategory.DISQUALIFIER,
                points=-POINTS_PER_MATCH * multiplier,
                note=disq[1],
            )

        reward = self._kb.match_reward(token)
        if reward is not None:
            return ParsedIngredient(
                name=token,
                position=position,
                category=IngredientCategory.REWARD,
                points=POINTS_PER_MATCH * multiplier,
                note=reward[1],
            )

        return ParsedIngredient(
            name=token,
            position=position,
            category=IngredientCategory.NEUTRAL,
            points=0.0,
            note=NEUTRAL_NOTE,
        )

    def analyze(self, inci_text: str) -> AnalysisResult:
        """
        Analyze a comma/newline separated INCI list.
        Never raises; an empty or delimiter-only list returns score 0 and no tags.
        """
        tokens = split_inci(inci_text)
        if not tokens:
            return AnalysisResult(
                score=0,
                max_score=MAX_SCORE,
                ingredients=(),
                summary=NO_INGREDIENTS_SUMMARY,
                hair_needs=(),
            )

        total_points = BASE_POINTS
        ingredients: List[ParsedIngredient] = []
        tags: List[str] = []

        for idx, token in enumerate(tokens):
            ing = self.classify(token, idx + 1)
            total_points += ing.points
            ingredients.append(ing)
            tags.extend(needs_for(token, ing.category))

        score = clamp_score(total_points)
        disq_count = sum(1 for i in ingredients if i.category is IngredientCategory.DISQUALIFIER)
        reward_count = sum(1 for i in ingredients if i.category is IngredientCategory.REWARD)
        hair_needs = finalize_needs(tags)

        logger.info(
            "INCI_ANALYSIS score=%d total_points=%.1f ingredients=%d disqualifiers=%d rewards=%d needs=%s",
            score, total_points, len(ingredients), disq_count, reward_count, hair_needs,
        )

        return AnalysisResult(
            score=score,
            max_score=MAX_SCORE,
            ingredients=tuple(ingredients),
            summary=compose_summary(score, disq_count, reward_count),
            hair_needs=tuple(hair_needs),
        )


_default_analyzer = IngredientAnalyzer()


def analyze(inci_text: str) -> AnalysisResult:
    """Analyze with the built-in knowledge base."""
    return _default_analyzer.analyze(inci_text)
