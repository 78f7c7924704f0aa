"""
Pair Export - Serialise a pair collection for download.

Two variants:
- train: [{"instruction", "answer"}], saved as <domain>-<type>-pairs.json
- eval:  [{"question", "answer"}], saved as <domain>-eval-pairs.json
"""

import json
import re
from pathlib import Path
from typing import Dict, List, Sequence

import yaml

from .synthesis.generator import Pair

VARIANTS = ("train", "eval")

# Path separators, quotes and control characters
_UNSAFE_CHARS = re.compile(r'[\x00-\x1f\x7f"\\/]')


def export_filename(domain: str, example_type: str) -> str:
    """Download name for a training-pair export."""
    return f"{domain}-{example_type}-pairs.json"


def eval_export_filename(domain: str) -> str:
    """Download name for an evaluation-pair export."""
    return f"{domain}-eval-pairs.json"


def filename_for(domain: str, example_type: str, variant: str = "train") -> str:
    _check_variant(variant)
    if variant == "eval":
        return eval_export_filename(domain)
    return export_filename(domain, example_type)


def safe_filename(name: str) -> str:
    """Replace path separators, quotes and control characters with '_'."""
    return _UNSAFE_CHARS.sub("_", name)


def to_records(pairs: Sequence[Pair], variant: str = "train") -> List[Dict[str, str]]:
    """Convert pairs to plain dicts in export order."""
    _check_variant(variant)
    if variant == "eval":
        return [pair.to_eval_dict() for pair in pairs]
    return [pair.to_dict() for pair in pairs]


def to_json(pairs: Sequence[Pair], variant: str = "train") -> str:
    """Pretty-printed JSON (2-space indent) of the collection."""
    return json.dumps(to_records(pairs, variant), indent=2, ensure_ascii=False)


def write_export(pairs: Sequence[Pair], output: str, variant: str = "train") -> str:
    """
    Write the collection to `output`.

    JSON by default; a .yaml/.yml suffix writes YAML instead.

    Returns:
        Path to the written file.
    """
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if output_path.suffix in [".yaml", ".yml"]:
            yaml.safe_dump(
                to_records(pairs, variant),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        else:
            f.write(to_json(pairs, variant))

    return str(output_path)


def _check_variant(variant: str):
    if variant not in VARIANTS:
        raise ValueError(f"Unknown export variant: {variant}")
