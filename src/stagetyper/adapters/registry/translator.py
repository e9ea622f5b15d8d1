"""Translate the registry sheet's CSV export into known stage types."""

from __future__ import annotations

import csv
import io


def parse_known_stage_types(csv_text: str) -> frozenset[str]:
    """Return the first-column values below the header row.

    Stray quotes and surrounding whitespace are removed; blank cells are skipped.
    """

    rows = csv.reader(io.StringIO(csv_text))
    next(rows, None)
    known: set[str] = set()
    for row in rows:
        if not row:
            continue
        value = row[0].replace('"', "").strip()
        if value:
            known.add(value)
    return frozenset(known)
