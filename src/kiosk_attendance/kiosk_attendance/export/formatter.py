"""Spreadsheet rendering of a store's live attendance log."""

from __future__ import annotations

import io
from datetime import date
from typing import Iterable, List

import pandas as pd
from openpyxl.utils import get_column_letter

from ..attendance.model import AttendanceEvent
from ..core.constants import EXPORT_COLUMN_WIDTHS, EXPORT_FILENAME_PREFIX, EXPORT_SHEET_NAME

EXPORT_COLUMNS = [
    "CÉDULA",
    "NOMBRE",
    "ÁREA",
    "TIPO",
    "FECHA",
    "HORA",
    "OBJETOS PERSONALES",
    "TAREAS",
]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def sort_for_export(events: Iterable[AttendanceEvent]) -> List[AttendanceEvent]:
    """Name ascending, then timestamp ascending."""
    return sorted(events, key=lambda e: (e.name, e.timestamp))


def build_export_rows(events: Iterable[AttendanceEvent]) -> List[dict]:
    rows: List[dict] = []
    for e in sort_for_export(events):
        rows.append(
            {
                "CÉDULA": e.badge_code,
                "NOMBRE": e.name,
                "ÁREA": e.area,
                "TIPO": e.kind.value,
                "FECHA": e.event_date,
                "HORA": e.event_time,
                "OBJETOS PERSONALES": e.personal_items or "",
                "TAREAS": ", ".join(e.tasks) if e.tasks else "",
            }
        )
    return rows


def render_workbook(rows: List[dict]) -> bytes:
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)

    # In-memory workbook, nothing is written to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
        sheet = writer.sheets[EXPORT_SHEET_NAME]
        for idx, width in enumerate(EXPORT_COLUMN_WIDTHS, start=1):
            sheet.column_dimensions[get_column_letter(idx)].width = width

    return output.getvalue()


def export_filename(today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}_{today.isoformat()}.xlsx"
