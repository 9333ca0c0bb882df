"""Tabular export of a yearly breakdown."""

from __future__ import annotations

import csv
import io
from typing import Iterable, List

from pydantic import ValidationError

from sipcalc.schemas.sip import YearlyRecord

CSV_HEADER = ["Year", "Monthly Investment", "Total Invested", "Interest Earned", "Total Value"]
TSV_HEADER = ["Year", "Invested", "Interest", "Total"]
CSV_FILENAME = "sip_breakdown.csv"


class BreakdownFormatError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _csv_row(row: YearlyRecord) -> List[int]:
    return [row.year, row.monthlyInvestment, row.investedAmount, row.interestEarned, row.totalValue]


def breakdown_to_csv(rows: Iterable[YearlyRecord]) -> str:
    """Header line plus one comma-separated line per year, no trailing newline."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(_csv_row(row))
    return buffer.getvalue().rstrip("\n")


def breakdown_from_csv(text: str) -> List[YearlyRecord]:
    """Parse text produced by :func:`breakdown_to_csv` back into records."""
    reader = csv.reader(io.StringIO(text.strip()))
    header = next(reader, None)
    if header is None or [cell.strip() for cell in header] != CSV_HEADER:
        raise BreakdownFormatError([f"unexpected header: {header!r}"])

    records: List[YearlyRecord] = []
    errors: List[str] = []
    for line_no, cells in enumerate(reader, start=2):
        if not cells:
            continue
        if len(cells) != len(CSV_HEADER):
            errors.append(f"line {line_no}: expected {len(CSV_HEADER)} columns, got {len(cells)}")
            continue
        try:
            year, monthly, invested, interest, total = (int(cell) for cell in cells)
            records.append(
                YearlyRecord(
                    year=year,
                    monthlyInvestment=monthly,
                    investedAmount=invested,
                    interestEarned=interest,
                    totalValue=total,
                )
            )
        except (ValueError, ValidationError) as exc:
            errors.append(f"line {line_no}: {exc}")

    if errors:
        raise BreakdownFormatError(errors)
    return records


def breakdown_to_tsv(rows: Iterable[YearlyRecord]) -> str:
    """Tab-separated table suitable for pasting into a spreadsheet."""
    lines = ["\t".join(TSV_HEADER)]
    for row in rows:
        lines.append(f"{row.year}\t{row.investedAmount}\t{row.interestEarned}\t{row.totalValue}")
    return "\n".join(lines)
