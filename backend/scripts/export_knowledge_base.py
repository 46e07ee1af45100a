"""
Export the static INCI knowledge base (disqualifiers + rewards) to data/knowledge_base.json
for the frontend and for review by content editors.
Run from repo root: python backend/scripts/export_knowledge_base.py [--out PATH]
"""
import argparse
import json
import sys
from pathlib import Path

# Add backend to path so we can import core
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from core.config import get_knowledge_base_export_path
from core.ontology.knowledge_base import DEFAULT_KNOWLEDGE_BASE


def export_knowledge_base(out: Path) -> dict:
    data = DEFAULT_KNOWLEDGE_BASE.to_dict()
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return data


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out", type=Path, default=get_knowledge_base_export_path())
    args = parser.parse_args()
    data = export_knowledge_base(args.out)
    print("Wrote", args.out, "with", len(data["disqualifiers"]), "disqualifiers and",
          len(data["rewards"]), "rewards")


if __name__ == "__main__":
    main()
