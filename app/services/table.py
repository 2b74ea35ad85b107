# app/services/table.py

from datetime import datetime
from numbers import Integral
import pandas as pd


TIMESTAMP_COLUMN = "Timestamp"


def cell_text(value) -> str:
    return "" if value is None else str(value)


def sheet_to_frame(sheet: dict) -> pd.DataFrame:
    """
    Rows become a text DataFrame ordered by the sheet's columns.
    The index is each row's position in sheet["rows"], which frame_to_rows
    uses to give back the stored values the user did not touch.
    """
    columns = list(sheet.get("columns", []))
    rows = [{column: cell_text(row.get(column)) for column in columns} for row in sheet.get("rows", [])]
    return pd.DataFrame(rows, columns=columns, dtype=str)


def frame_to_rows(frame: pd.DataFrame, original_rows: list[dict] | None = None) -> list[dict]:
    """
    Edited rows back to sheet rows. Unchanged cells keep their stored value
    (numbers stay numbers), keys outside the visible columns are carried over,
    and rows left completely blank are dropped.
    """
    original_rows = original_rows or []
    rows = []
    for index, record in frame.fillna("").astype(str).iterrows():
        if not any(value.strip() for value in record.values):
            continue

        known = isinstance(index, Integral) and 0 <= index < len(original_rows)
        base = original_rows[int(index)] if known else {}
        row = dict(base)
        for column, value in record.items():
            if column in base and cell_text(base[column]) == value:
                continue
            if column not in base and value == "":
                continue
            row[column] = value
        rows.append(row)
    return rows


def stamp_rows(rows: list[dict], columns: list[str], now: datetime | None = None) -> list[dict]:
    """Fills an empty Timestamp cell with the current time, when the sheet has that column."""
    if TIMESTAMP_COLUMN not in columns:
        return rows
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M")
    for row in rows:
        if not row.get(TIMESTAMP_COLUMN):
            row[TIMESTAMP_COLUMN] = stamp
    return rows


def add_column(sheet: dict, name: str) -> dict:
    name = name.strip()
    if not name or name in sheet["columns"]:
        return sheet
    return {**sheet, "columns": sheet["columns"] + [name]}


def remove_column(sheet: dict, name: str) -> dict:
    rows = [{k: v for k, v in row.items() if k != name} for row in sheet["rows"]]
    return {**sheet, "columns": [c for c in sheet["columns"] if c != name], "rows": rows}
