#!/usr/bin/env python3
"""CLI for scoring data records against a quality scoring model."""

import argparse
import json
import logging
import sys
import uuid
from pathlib import Path

import jsonschema
from dotenv import load_dotenv

load_dotenv()

from quality_score import config
from quality_score.audit import audit_log, setup_app_logging
from quality_score.loader import load_model, load_records
from quality_score.run_report import build_run_report, write_run_report

log = logging.getLogger("quality_score.cli")


def _load_model_or_exit(spec: str):
    try:
        return load_model(spec)
    except (ImportError, ValueError, TypeError) as e:
        print(f"Error: could not load model {spec}: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_score(args: argparse.Namespace) -> None:
    """Score every record in a file, write a run report, append an audit entry."""
    model = _load_model_or_exit(args.model)
    try:
        records = load_records(args.records)
    except FileNotFoundError as e:
        audit_log("score", "error", model=model.name, filename=str(args.records), error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        audit_log("score", "error", model=model.name, filename=str(args.records), error=str(e))
        print(f"Error: invalid JSON in {args.records}: {e}", file=sys.stderr)
        sys.exit(1)

    run_id = str(uuid.uuid4())[:8]
    log.info("Score started: model=%s records=%d run_id=%s", model.name, len(records), run_id)
    reports_dir = Path(args.reports_dir) if args.reports_dir else config.reports_dir()
    report_path = reports_dir / f"run_report_{run_id}.json"
    try:
        report = build_run_report(model, records, run_id)
        write_run_report(report_path, report)
    except (jsonschema.ValidationError, ValueError) as e:
        message = e.message if isinstance(e, jsonschema.ValidationError) else str(e)
        log.error("Score failed: run_id=%s %s", run_id, message)
        audit_log("score", "error", model=model.name, filename=str(args.records), error=message, extra={"run_id": run_id})
        print(f"Error: could not build run report: {message}", file=sys.stderr)
        sys.exit(1)

    audit_log(
        "score",
        "ok",
        model=model.name,
        score=report["mean_score"],
        filename=str(args.records),
        extra={"run_id": run_id, "record_count": report["record_count"], "valid_count": report["valid_count"]},
    )
    log.info("Score complete: mean_score=%s valid=%d/%d", report["mean_score"], report["valid_count"], report["record_count"])

    show_messages = args.messages or config.show_messages_default()
    if args.json:
        out = report if show_messages else {k: v for k, v in report.items() if k != "records"}
        if not show_messages:
            out["scores"] = [r["score"] for r in report["records"]]
        print(json.dumps(out, indent=2))
    else:
        print(f"=== {model.name} (max {model.weights}) ===")
        for r in report["records"]:
            flag = "" if r["valid"] else "  INVALID"
            print(f"[{r['index']}] {r['score']:g}{flag}")
            if show_messages:
                for name, fr in r["fields"].items():
                    for msg in fr["messages"]:
                        print(f"    {name}: {msg}")
        print(f"\nMean: {report['mean_score']:g}  Valid: {report['valid_count']}/{report['record_count']}")
    print(f"Run report: {report_path}", file=sys.stderr)


def cmd_describe(args: argparse.Namespace) -> None:
    """Print the fields and validators of a model."""
    model = _load_model_or_exit(args.model)
    print(f"Model: {model.name}")
    print(f"Total weight: {model.weights:g}")
    for field in model.fields:
        req = " (required)" if field.required else ""
        print(f"  {field.name}: weight {field.weight:g}{req}")
        for _, message, required in field.validators:
            tag = " [required]" if required else ""
            print(f"    - {message or '(no message)'}{tag}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Weighted quality scoring of data records")
    sub = parser.add_subparsers(dest="command", required=True)

    # score
    p_score = sub.add_parser("score", help="Score records from a JSON or JSONL file")
    p_score.add_argument("records", type=Path, help="Path to JSON (object or list) or .jsonl file")
    p_score.add_argument("--model", required=True, help="Model import path, e.g. quality_score.sample:build_contact_model")
    p_score.add_argument("--messages", action="store_true", help="Include per-field messages")
    p_score.add_argument("--reports-dir", type=Path, default=None, help="Directory for run_report.json (default: QUALITY_SCORE_REPORTS_DIR or artifacts)")
    p_score.add_argument("--json", action="store_true", help="Output JSON")
    p_score.set_defaults(func=cmd_score)

    # describe
    p_desc = sub.add_parser("describe", help="Show a model's fields and validators")
    p_desc.add_argument("--model", required=True, help="Model import path")
    p_desc.set_defaults(func=cmd_describe)

    args = parser.parse_args(argv)
    setup_app_logging()
    args.func(args)


if __name__ == "__main__":
    main()
