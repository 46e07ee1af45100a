"""
Static INCI knowledge base for hair-care scoring.

Two ordered tables keyed by a lowercase substring pattern of an INCI name:
disqualifiers (net-negative for hair health) and rewards (net-positive).
Lookup is substring containment against a lowercased ingredient token and the
first pattern in declaration order wins, so the order of each table is part of
its contract (e.g. "sodium laureth sulfate" is declared before "sles").
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

DISQUALIFIERS: Mapping[str, str] = MappingProxyType({
    "sodium lauryl sulfate": "Harsh surfactant that strips natural oils",
    "sodium laureth sulfate": "Can cause dryness and irritation over time",
    "sls": "Harsh surfactant (sodium lauryl sulfate)",
    "sles": "Can cause dryness (sodium laureth sulfate)",
    "formaldehyde": "Known irritant and potential carcinogen",
    "dmdm hydantoin": "Formaldehyde releaser, may cause scalp sensitivity",
    "parabens": "Endocrine disruptor concerns",
    "methylparaben": "Paraben preservative, may accumulate",
    "propylparaben": "Paraben preservative, endocrine concerns",
    "mineral oil": "Can create build-up, blocks moisture",
    "petrolatum": "Coating agent, traps dirt, blocks moisture",
    "isopropyl alcohol": "Drying alcohol, strips moisture",
    "diethanolamine": "Potential irritant and environmental concern",
    "triethanolamine": "Can cause scalp irritation",
    "polyethylene glycol": "Can strip natural moisture",
    "dimethicone": "Silicone build-up without sulfate cleansing",
})

REWARDS: Mapping[str, str] = MappingProxyType({
    "glycerin": "Excellent humectant, draws moisture to hair",
    "aloe barbadensis": "Soothing, hydrating, strengthens strands",
    "aloe vera": "Natural moisturizer and scalp soother",
    "panthenol": "Pro-vitamin B5, adds shine and elasticity",
    "hydrolyzed keratin": "Repairs and strengthens damaged hair",
    "argan oil": "Rich in vitamin E, deep conditioning",
    "argania spinosa": "Argan oil, nourishing and smoothing",
    "jojoba oil": "Mimics natural sebum, balances scalp",
    "simmondsia chinensis": "Jojoba, lightweight moisture balance",
    "coconut oil": "Deep penetrating moisture",
    "cocos nucifera": "Coconut oil, protein loss prevention",
    "shea butter": "Rich emollient, seals in moisture",
    "butyrospermum parkii": "Shea butter, intense conditioning",
    "biotin": "Supports hair growth and thickness",
    "niacinamide": "Improves scalp circulation and health",
    "hyaluronic acid": "Intense hydration for hair and scalp",
    "castor oil": "Strengthens roots, promotes growth",
    "rosemary extract": "Stimulates growth, reduces shedding",
    "rosmarinus officinalis": "Rosemary, DHT blocker, growth booster",
    "tea tree oil": "Antimicrobial, cleanses scalp naturally",
    "silk amino acids": "Smooths cuticle, adds shine",
    "ceramide": "Restores hair barrier and prevents breakage",
    "peptides": "Building blocks for stronger strands",
})

KNOWLEDGE_BASE_VERSION = "1.0"


def first_match(token: str, table: Mapping[str, str]) -> Optional[Tuple[str, str]]:
    """Return (pattern, note) for the first declared pattern contained in token, else None."""
    key = (token or "").lower()
    for pattern, note in table.items():
        if pattern in key:
            return pattern, note
    return None


@dataclass(frozen=True)
class IngredientKnowledgeBase:
    disqualifiers: Mapping[str, str] = field(default_factory=lambda: DISQUALIFIERS)
    rewards: Mapping[str, str] = field(default_factory=lambda: REWARDS)
    version: str = KNOWLEDGE_BASE_VERSION

    def match_disqualifier(self, token: str) -> Optional[Tuple[str, str]]:
        return first_match(token, self.disqualifiers)

    def match_reward(self, token: str) -> Optional[Tuple[str, str]]:
        return first_match(token, self.rewards)

    def __len__(self) -> int:
        return len(self.disqualifiers) + len(self.rewards)

    def to_dict(self) -> dict:
        # Lists of pairs keep declaration order explicit for non-Python readers
        return {
            "version": self.version,
            "disqualifiers": [{"pattern": p, "note": n} for p, n in self.disqualifiers.items()],
            "rewards": [{"pattern": p, "note": n} for p, n in self.rewards.items()],
        }


DEFAULT_KNOWLEDGE_BASE = IngredientKnowledgeBase()
