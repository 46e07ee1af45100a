"""
Unit tests: INCI tokenization, saved-analysis naming, static knowledge base, export script.
Run from backend: python -m pytest tests/test_knowledge_base_and_parser.py -v
"""
import importlib.util
import json
from pathlib import Path

import pytest


def test_split_inci_commas_and_newlines():
    """Runs of commas/newlines collapse to one boundary."""
    from core.parsing.inci_parser import split_inci
    assert split_inci("Water,,Glycerin\n\nPanthenol,\n Biotin") == ["water", "glycerin", "panthenol", "biotin"]


def test_split_inci_keeps_parentheses_and_slashes():
    """Only commas and newlines split; parenthetical aliases stay in the token."""
    from core.parsing.inci_parser import split_inci
    assert split_inci("Aqua (Water), Dimethicone/Vinyl Dimethicone") == [
        "aqua (water)", "dimethicone/vinyl dimethicone",
    ]


@pytest.mark.parametrize("text", ["", " ", ",,,", "\n,\n", None, 42])
def test_split_inci_empty(text):
    from core.parsing.inci_parser import split_inci
    assert split_inci(text) == []


def test_derive_analysis_name():
    from core.parsing.inci_parser import derive_analysis_name
    assert derive_analysis_name("Water, Glycerin") == "Water"
    assert derive_analysis_name("  , Glycerin") == "Analysis"
    assert derive_analysis_name("") == "Analysis"
    assert derive_analysis_name("x" * 80 + ", water") == "x" * 50


def test_knowledge_base_declaration_order():
    """First-match lookup depends on declaration order; lock in the leading entries."""
    from core.ontology.knowledge_base import DISQUALIFIERS, REWARDS
    assert list(DISQUALIFIERS)[:4] == ["sodium lauryl sulfate", "sodium laureth sulfate", "sls", "sles"]
    assert list(DISQUALIFIERS)[-1] == "dimethicone"
    assert list(REWARDS)[:3] == ["glycerin", "aloe barbadensis", "aloe vera"]
    assert len(DISQUALIFIERS) == 16
    assert len(REWARDS) == 23


def test_knowledge_base_is_read_only():
    from core.ontology.knowledge_base import DISQUALIFIERS, REWARDS, DEFAULT_KNOWLEDGE_BASE
    with pytest.raises(TypeError):
        DISQUALIFIERS["water"] = "Not actually bad"
    with pytest.raises(TypeError):
        REWARDS["water"] = "Not actually good"
    with pytest.raises(Exception):
        DEFAULT_KNOWLEDGE_BASE.version = "2.0"


def test_patterns_are_lowercase():
    from core.ontology.knowledge_base import DISQUALIFIERS, REWARDS
    for pattern in list(DISQUALIFIERS) + list(REWARDS):
        assert pattern == pattern.lower().strip()


def test_first_match_case_insensitive():
    from core.ontology.knowledge_base import DEFAULT_KNOWLEDGE_BASE
    assert DEFAULT_KNOWLEDGE_BASE.match_disqualifier("Sodium Lauryl Sulfate")[0] == "sodium lauryl sulfate"
    assert DEFAULT_KNOWLEDGE_BASE.match_reward("Hydrolyzed Keratin")[0] == "hydrolyzed keratin"
    assert DEFAULT_KNOWLEDGE_BASE.match_reward("water") is None
    assert DEFAULT_KNOWLEDGE_BASE.match_disqualifier("") is None


def test_knowledge_base_to_dict_preserves_order():
    from core.ontology.knowledge_base import DEFAULT_KNOWLEDGE_BASE, DISQUALIFIERS
    d = DEFAULT_KNOWLEDGE_BASE.to_dict()
    assert d["version"] == "1.0"
    assert [e["pattern"] for e in d["disqualifiers"]] == list(DISQUALIFIERS)
    assert len(DEFAULT_KNOWLEDGE_BASE) == len(d["disqualifiers"]) + len(d["rewards"])


@pytest.mark.parametrize("pattern,note", [
    ("petrolatum", "Coating agent, traps dirt, blocks moisture"),
    ("rosmarinus officinalis", "Rosemary, DHT blocker, growth booster"),
    ("dmdm hydantoin", "Formaldehyde releaser, may cause scalp sensitivity"),
    ("glycerin", "Excellent humectant, draws moisture to hair"),
])
def test_note_wording(pattern, note):
    from core.ontology.knowledge_base import DISQUALIFIERS, REWARDS
    assert {**DISQUALIFIERS, **REWARDS}[pattern] == note


def test_notes_have_no_em_dashes():
    from core.ontology.knowledge_base import DISQUALIFIERS, REWARDS
    assert all("—" not in n for n in list(DISQUALIFIERS.values()) + list(REWARDS.values()))


def test_export_script_writes_json(tmp_path):
    script = Path(__file__).resolve().parent.parent / "scripts" / "export_knowledge_base.py"
    spec = importlib.util.spec_from_file_location("export_knowledge_base", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    out = tmp_path / "kb" / "knowledge_base.json"
    module.export_knowledge_base(out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["disqualifiers"][0] == {
        "pattern": "sodium lauryl sulfate",
        "note": "Harsh surfactant that strips natural oils",
    }
    assert len(data["rewards"]) == 23
