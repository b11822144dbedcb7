"""
CSV import/export for vocabulary items.

Export layout: header "sourceText,targetText,phoneticHint", one row per
item, minimal quoting (fields holding a comma, quote or newline are quoted
with embedded quotes doubled).

Import accepts loosely formatted pasted text: the first two columns are the
source and target phrases, anything after them is ignored, and a leading
header row is skipped.
"""

import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from ..config import Config
from ..models import VocabularyItem
from ..utils.parsing import TextParser

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["sourceText", "targetText", "phoneticHint"]

# Lowercased cell values that mark a header row on import
HEADER_WORDS = {"sourcetext", "targettext", "source", "target", "mandarin", "english", "translation"}


def items_to_dataframe(items: Sequence[VocabularyItem]) -> pd.DataFrame:
    """Build the export table for items."""
    rows = [
        {
            "sourceText": item.source_text,
            "targetText": item.target_text,
            "phoneticHint": item.phonetic_hint or "",
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_items_to_csv(items: Sequence[VocabularyItem]) -> str:
    """
    Export items as CSV text.

    Args:
        items: Items to export

    Returns:
        CSV string with header row and "\\n" line endings (no trailing newline)
    """
    df = items_to_dataframe(items)
    text = df.to_csv(index=False, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    return text.rstrip("\n")


def default_export_filename(today: Optional[date] = None) -> str:
    """Filename like "phraser-translations-2026-10-17.csv"."""
    today = today or date.today()
    return f"{Config.EXPORT_PREFIX}-{today.isoformat()}.csv"


def write_csv_file(items: Sequence[VocabularyItem], path: Optional[str] = None) -> Path:
    """
    Write items to a CSV file.

    Args:
        items: Items to export
        path: Output file (defaults to a dated file in Config.DATA_DIR)

    Returns:
        Path written
    """
    target = Path(path) if path else Path(Config.DATA_DIR) / default_export_filename()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(export_items_to_csv(items), encoding="utf-8")
    logger.info("Exported %d items to %s", len(items), target)
    return target


def _is_header_row(row: List[str]) -> bool:
    return any(cell.strip().lower() in HEADER_WORDS for cell in row[:2])


def parse_csv_entries(text: str) -> List[Tuple[str, str]]:
    """
    Parse pasted CSV rows into (source, target) pairs.

    Blank rows, a leading header row, rows with fewer than two cells and
    rows with an empty phrase are skipped.

    Args:
        text: Raw CSV text

    Returns:
        Entries ready for ItemRepository.create_batch()
    """
    raw = (text or "").lstrip("\ufeff").strip()
    if not raw:
        return []

    reader = csv.reader(io.StringIO(raw), delimiter=",", quotechar='"', doublequote=True)
    rows = [row for row in reader if any(cell.strip() for cell in row)]

    if rows and _is_header_row(rows[0]):
        rows = rows[1:]

    entries: List[Tuple[str, str]] = []
    for line_no, row in enumerate(rows, start=1):
        if len(row) < 2:
            logger.info("Skipping CSV row %d: expected at least 2 fields, got %d", line_no, len(row))
            continue

        source = TextParser.clean_phrase(row[0])
        target = TextParser.clean_phrase(row[1])
        if not source or not target:
            logger.info("Skipping CSV row %d: empty phrase", line_no)
            continue
        entries.append((source, target))

    return entries


def read_csv_file(path: str) -> List[Tuple[str, str]]:
    """
    Read entries from a CSV file.

    Args:
        path: CSV file (UTF-8, BOM tolerated)

    Returns:
        Parsed (source, target) pairs

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return parse_csv_entries(f.read())
