from __future__ import annotations

import io
from datetime import date

import pandas as pd

from ..core.constants import MONTH_NAMES
from .formatter import Grid

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def write_xlsx(grid: Grid, *, sheet_name: str) -> io.BytesIO:
    """Encode a grid (header row first) as an in-memory .xlsx workbook."""

    # Header goes in as a plain row: employee names may repeat, DataFrame columns would clash.
    df = pd.DataFrame(grid)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, header=False, sheet_name=sheet_name)

    output.seek(0)
    return output


def delivery_report_filename(start: date, end: date) -> str:
    return f"delivery_report_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.xlsx"


def salary_report_filename(year: int, month: int) -> str:
    return f"{MONTH_NAMES[int(month) - 1]}-{int(year)}-salary report.xlsx"
