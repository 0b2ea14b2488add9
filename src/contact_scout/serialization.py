"""JSON serialization of customer records."""

from __future__ import annotations

import json
from pathlib import Path

from .models import CustomerRecord


def records_to_json(records: list[CustomerRecord]) -> str:
    """Render records as the JSON array served to clients."""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def write_records(path: str, records: list[CustomerRecord]) -> None:
    output_path = Path(path)
    output_path.write_text(records_to_json(records) + "\n", encoding="utf-8")
