"""Export Workbook: renders character rows as an .xlsx document.

Invariants:
    - One worksheet titled "list details"
    - Header row: Character, Movies; then one row per CharacterRow, in order
    - Filename is "<unix epoch ms>data.xlsx"
"""

import io
import time
from typing import Iterable

from openpyxl import Workbook

from favorites_api.core.domain_types import CharacterRow

XLSX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)
SHEET_TITLE = "list details"
HEADER = ("Character", "Movies")


def render_workbook(rows: Iterable[CharacterRow]) -> bytes:
    """Serialize rows to xlsx bytes."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(HEADER)
    for name, movies in rows:
        sheet.append((name, movies))

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def export_filename(now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}data.xlsx"


def content_disposition(filename: str) -> str:
    return f"attachment; filename={filename}"
