from datetime import date

import pandas as pd
from openpyxl import load_workbook

from src.courier_payroll.courier_payroll.reports.exporter import (
    delivery_report_filename,
    salary_report_filename,
    write_xlsx,
)


def test_write_xlsx_keeps_header_as_first_row():
    grid = [
        ["Date", "Anil Kumar Delivered", "Total Profit"],
        ["2024-03-01", 10, 500],
        ["Total", 10, 500],
    ]

    content = write_xlsx(grid, sheet_name="Deliveries")
    df = pd.read_excel(content, header=None)

    assert df.shape == (3, 3)
    assert list(df.iloc[0]) == ["Date", "Anil Kumar Delivered", "Total Profit"]
    assert df.iloc[2, 0] == "Total"
    assert df.iloc[2, 2] == 500


def test_write_xlsx_sheet_name():
    content = write_xlsx([["Name"], ["Anil Kumar"]], sheet_name="Salary Report")

    workbook = load_workbook(content)

    assert workbook.sheetnames == ["Salary Report"]
    assert workbook["Salary Report"]["A2"].value == "Anil Kumar"


def test_filenames():
    assert salary_report_filename(2024, 3) == "March-2024-salary report.xlsx"
    assert delivery_report_filename(date(2024, 3, 1), date(2024, 3, 31)) == "delivery_report_20240301_20240331.xlsx"
