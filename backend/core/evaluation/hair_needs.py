"""
Hair-need tags derived from classified ingredients.
Tags are triggered by keywords in the ingredient token, per category.
An analysis with no triggered tag gets "General Maintenance".
"""
from typing import Iterable, List, Tuple

from core.models.analysis import IngredientCategory

MOISTURE_RECOVERY = "Moisture Recovery"
CLARIFYING_CLEANSE = "Clarifying Cleanse"
STRENGTH_AND_REPAIR = "Strength & Repair"
DEEP_HYDRATION = "Deep Hydration"
GENERAL_MAINTENANCE = "General Maintenance"

# (keywords, tag): tag fires when any keyword is a substring of the token
_DISQUALIFIER_TRIGGERS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("sulfate", "alcohol"), MOISTURE_RECOVERY),
    (("silicone", "dimethicone"), CLARIFYING_CLEANSE),
)
_REWARD_TRIGGERS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("keratin", "biotin"), STRENGTH_AND_REPAIR),
    (("glycerin", "aloe", "hyaluronic"), DEEP_HYDRATION),
)


def needs_for(token: str, category: IngredientCategory) -> List[str]:
    """Tags triggered by a single classified token. Neutral tokens trigger nothing."""
    if category is IngredientCategory.DISQUALIFIER:
        triggers = _DISQUALIFIER_TRIGGERS
    elif category is IngredientCategory.REWARD:
        triggers = _REWARD_TRIGGERS
    else:
        return []
    return [tag for keywords, tag in triggers if any(k in token for k in keywords)]


def finalize_needs(tags: Iterable[str]) -> List[str]:
    """Deduplicate preserving first-trigger order; default when nothing fired."""
    out = list(dict.fromkeys(tags))
    return out or [GENERAL_MAINTENANCE]
