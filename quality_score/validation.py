"""JSON Schema checks for what this package produces: detailed score results and run reports."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def _validator(kind: str) -> jsonschema.Draft202012Validator:
    schema = json.loads((SCHEMAS_DIR / f"{kind}.schema.json").read_text(encoding="utf-8"))
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def validate_score_result(result: dict) -> None:
    """Raises jsonschema.ValidationError if a show_messages result is malformed (e.g. a non-string message)."""
    _validator("score_result").validate(result)


def validate_run_report(report: dict) -> None:
    _validator("run_report").validate(report)
