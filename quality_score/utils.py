"""Record hashing, JSON number coercion and timestamps for reports and audit entries."""

import hashlib
import json
from datetime import datetime, timezone


def json_number(value):
    """Scores may be Fraction or Decimal; reports carry them as plain JSON numbers."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return float(value)


def hash_record(record) -> str:
    """SHA256 of a record's canonical JSON (sorted keys, compact separators)."""
    canonical = json.dumps(record, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def iso_now() -> str:
    """UTC timestamp with millisecond precision, Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
