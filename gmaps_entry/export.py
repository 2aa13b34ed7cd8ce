"""
Entry Export

Writes extracted entries to CSV (one row per entry, nested fields as
compact JSON) and to JSON (field labels as aliases).
"""

import csv
import json
import os
from typing import Dict, Iterable, List

from .models import Entry


def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_csv(entries: Iterable[Entry], csv_path: str) -> int:
    """Write entries to a CSV file with a header row. Returns rows written."""
    _ensure_parent(csv_path)
    count = 0
    with open(csv_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(Entry.csv_headers())
        for entry in entries:
            writer.writerow(entry.csv_row())
            count += 1
    return count


def entries_to_dicts(entries: Iterable[Entry]) -> List[Dict]:
    return [entry.model_dump(mode="json", by_alias=True) for entry in entries]


def write_json(entries: Iterable[Entry], output_file: str, metadata: Dict = None) -> int:
    """Write entries to a JSON file as {"metadata": ..., "entries": [...]}."""
    _ensure_parent(output_file)
    records = entries_to_dicts(entries)
    result_data = {
        'metadata': metadata or {},
        'entries': records,
    }
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(result_data, f, indent=2, ensure_ascii=False)
    return len(records)
