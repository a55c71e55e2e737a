"""Build and write run_report.json for auditability."""

import json
from pathlib import Path

from quality_score.model import ScoringModel
from quality_score.utils import hash_record, iso_now, json_number
from quality_score.validation import validate_run_report, validate_score_result


def build_run_report(model: ScoringModel, records: list, run_id: str) -> dict:
    """
    Score every record with messages and summarize the run.
    Records themselves are not stored, only their hashes.
    Raises jsonschema.ValidationError if a result is malformed.
    """
    results = []
    for i, record in enumerate(records):
        detail = model.score(record, show_messages=True)
        validate_score_result(detail)
        results.append({
            "index": i,
            "record_hash": hash_record(record),
            "score": json_number(detail["score"]),
            "valid": detail["valid"],
            "fields": {
                name: {**fr, "score": json_number(fr["score"])}
                for name, fr in detail["fields"].items()
            },
        })

    total = sum(r["score"] for r in results)
    return {
        "run_id": run_id,
        "timestamp": iso_now(),
        "model": model.name,
        "total_weight": json_number(model.weights),
        "record_count": len(results),
        "valid_count": sum(1 for r in results if r["valid"]),
        "mean_score": total / len(results) if results else 0,
        "records": results,
    }


def write_run_report(output_path: Path, report: dict) -> None:
    """Validate and write a run report. Non-finite numbers raise ValueError instead of writing NaN/Infinity."""
    validate_run_report(report)
    text = json.dumps(report, indent=2, allow_nan=False)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
