"""
Split a pasted INCI label into ingredient tokens.
Commas and newlines are delimiters; runs of them count as one boundary.
Order is preserved because INCI lists are declared by descending concentration.
"""
import re
from typing import List

INCI_DELIMITER = re.compile(r"[,\n]+")

DEFAULT_ANALYSIS_NAME = "Analysis"
ANALYSIS_NAME_MAX_LENGTH = 50


def split_inci(text: str) -> List[str]:
    """
    'Water, Glycerin,\\n\\nPanthenol' -> ['water', 'glycerin', 'panthenol']
    Tokens are trimmed and lowercased; empty tokens are dropped.
    Non-string input yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []
    tokens = (part.strip().lower() for part in INCI_DELIMITER.split(text))
    return [t for t in tokens if t]


def derive_analysis_name(text: str, max_length: int = ANALYSIS_NAME_MAX_LENGTH) -> str:
    """Display name for a saved analysis: first comma part, trimmed and truncated."""
    if not text or not isinstance(text, str):
        return DEFAULT_ANALYSIS_NAME
    first = text.split(",")[0].strip()[:max_length]
    return first or DEFAULT_ANALYSIS_NAME
