#!/usr/bin/env python3
"""
Repeatability harness: score the same records N times; assert identical results.
Exits 0 if stable, 1 if unstable. Prints the differing record indexes on failure.

Usage: python scripts/repeatability_check.py records.json [--runs 10] [--model module:attr]
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from quality_score.loader import load_model, load_records
from quality_score.utils import hash_record

DEFAULT_RUNS = 10
DEFAULT_MODEL = "quality_score.sample:build_contact_model"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("records", type=Path)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--model", default=DEFAULT_MODEL)
    args = parser.parse_args()

    try:
        records = load_records(args.records)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    try:
        model = load_model(args.model)
    except (ImportError, ValueError, TypeError) as e:
        print(f"Error: could not load model {args.model}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"model: {model.name}  records: {len(records)}  runs: {args.runs}")
    print(f"records_hash: {hash_record(records)[:16]}")

    runs = [[model.score(r, show_messages=True) for r in records] for _ in range(args.runs)]
    first = runs[0]
    unstable = set()
    for run in runs[1:]:
        for i, (a, b) in enumerate(zip(first, run)):
            if a != b:
                unstable.add(i)

    if unstable:
        print(f"UNSTABLE: {len(unstable)} record(s) differ across runs: {sorted(unstable)}")
        for i in sorted(unstable)[:5]:
            print(json.dumps([run[i]["score"] for run in runs]))
        sys.exit(1)

    print(f"STABLE: scores {[r['score'] for r in first]}")


if __name__ == "__main__":
    main()
