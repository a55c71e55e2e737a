"""Load scoring models from import paths and records from JSON files."""

import importlib
import json
from pathlib import Path

from quality_score.model import ScoringModel


def load_model(spec: str) -> ScoringModel:
    """
    Resolve "package.module:attribute" to a ScoringModel.
    The attribute may be a model or a zero-argument callable returning one.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Model spec must look like 'package.module:attribute', got {spec!r}")

    module = importlib.import_module(module_name)
    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"Module {module_name} has no attribute {attr!r}") from e

    if not isinstance(target, ScoringModel) and callable(target):
        target = target()
    if not isinstance(target, ScoringModel):
        raise TypeError(f"{spec} did not resolve to a ScoringModel (got {type(target).__name__})")
    return target


def load_records(path: Path) -> list:
    """
    Read records from a JSON file (one object or a list) or a JSON Lines file (.jsonl).
    Raises FileNotFoundError if the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")
    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() == ".jsonl":
        return [json.loads(line) for line in text.splitlines() if line.strip()]

    data = json.loads(text)
    return data if isinstance(data, list) else [data]
