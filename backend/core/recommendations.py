"""
Smart Picks: a small curated product catalog matched to hair-need tags.
The catalog is static; products carry their own tags and a one-line reason.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.evaluation.hair_needs import (
    CLARIFYING_CLEANSE,
    DEEP_HYDRATION,
    GENERAL_MAINTENANCE,
    MOISTURE_RECOVERY,
    STRENGTH_AND_REPAIR,
)

logger = logging.getLogger(__name__)

AFFILIATE_URL = "https://www.amazon.com/dp/B07XYZEXAMPLE?tag=meetaudreyeva-20"


@dataclass(frozen=True)
class Product:
    name: str
    brand: str
    score: int
    why: str
    tags: Tuple[str, ...]
    affiliate: str = AFFILIATE_URL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "brand": self.brand,
            "score": self.score,
            "why": self.why,
            "tags": list(self.tags),
            "affiliate": self.affiliate,
        }


CATALOG: Tuple[Product, ...] = (
    Product("Moisture Recovery Shampoo", "Joico", 9,
            "Glycerin + panthenol in first 3. Sulfate-free.", ("Hydration", "Color-Safe")),
    Product("Hydrating Conditioner", "Moroccanoil", 9,
            "Argan oil + glycerin top 5. Lightweight moisture.", ("Deep Conditioning", "Shine")),
    Product("Curl Defining Cream", "SheaMoisture", 8,
            "Shea butter + coconut oil. Great for curly/coily.", ("Curls", "Definition")),
    Product("Scalp Revival Charcoal Shampoo", "Briogeo", 8,
            "Tea tree + biotin. Clarifying without stripping.", ("Scalp Health", "Clarifying")),
    Product("Strengthening Amino Masque", "Kérastase", 8,
            "Ceramides + silk amino acids in first 5.", ("Repair", "Luxury")),
    Product("Rosemary Mint Shampoo", "Mielle", 7,
            "Rosemary + biotin. Growth-boosting formula.", ("Growth", "Scalp")),
    Product("Bond Repair Treatment", "Olaplex No.3", 9,
            "Patented bond repair. Standalone hero ingredient.", ("Bond Repair", "Damage")),
    Product("Hydra-Boost Shampoo", "Pureology", 8,
            "Hyaluronic acid + green tea. Color-safe moisture.", ("Color-Safe", "Hydration")),
)

# Hair-need tag -> catalog tags that answer it. General Maintenance takes the whole catalog.
NEED_TO_CATALOG_TAGS: Dict[str, Tuple[str, ...]] = {
    DEEP_HYDRATION: ("Hydration", "Deep Conditioning"),
    MOISTURE_RECOVERY: ("Hydration", "Deep Conditioning"),
    STRENGTH_AND_REPAIR: ("Repair", "Bond Repair", "Damage", "Growth"),
    CLARIFYING_CLEANSE: ("Clarifying", "Scalp Health"),
}


def recommend(hair_needs: Optional[Iterable[str]] = None, limit: Optional[int] = None) -> List[Product]:
    """
    Products matching any of the given hair-need tags, best score first
    (ties keep catalog order). No needs, or General Maintenance, returns the
    whole catalog. Unknown tags match nothing.
    """
    needs = [n for n in (hair_needs or []) if n]
    if not needs or GENERAL_MAINTENANCE in needs:
        picks = list(CATALOG)
    else:
        wanted = set()
        for need in needs:
            wanted.update(NEED_TO_CATALOG_TAGS.get(need, ()))
        picks = [p for p in CATALOG if wanted.intersection(p.tags)]
    picks.sort(key=lambda p: p.score, reverse=True)
    if limit is not None:
        picks = picks[:max(0, limit)]
    logger.debug("RECOMMEND needs=%s picks=%d", needs, len(picks))
    return picks
