"""
Deterministic summary text for an INCI analysis.
Sentence order is fixed: score, First 5 Rule note, concern/benefit counts, closing verdict.
The summary doubles as the read-aloud script, so it stays plain text.
"""
from core.models.analysis import MAX_SCORE

NO_INGREDIENTS_SUMMARY = "No ingredients to analyze."
FIRST_FIVE_NOTE = "First 5 ingredients make up ~80-90% of the formula. "

EXCELLENT_THRESHOLD = 8
DECENT_THRESHOLD = 5

_CLOSING_EXCELLENT = "Excellent formula for hair health!"
_CLOSING_DECENT = "Decent formula with room for improvement."
_CLOSING_POOR = "Consider switching to a gentler, more nourishing product."


def compose_closing(score: int) -> str:
    if score >= EXCELLENT_THRESHOLD:
        return _CLOSING_EXCELLENT
    if score >= DECENT_THRESHOLD:
        return _CLOSING_DECENT
    return _CLOSING_POOR


def compose_summary(
    score: int,
    disqualifier_count: int,
    reward_count: int,
    max_score: int = MAX_SCORE,
) -> str:
    """
    'Score: 4/10. First 5 ingredients make up ~80-90% of the formula.
    Found 3 concerning ingredient(s). Found 2 beneficial ingredient(s).
    Consider switching to a gentler, more nourishing product.'
    """
    summary = f"Score: {score}/{max_score}. "
    summary += FIRST_FIVE_NOTE
    if disqualifier_count > 0:
        summary += f"Found {disqualifier_count} concerning ingredient(s). "
    if reward_count > 0:
        summary += f"Found {reward_count} beneficial ingredient(s). "
    summary += compose_closing(score)
    return summary
