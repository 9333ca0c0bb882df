"""Chart-ready views of a projection result."""

from __future__ import annotations

from typing import Dict, List, Union

from sipcalc.schemas.sip import ProjectionResult


def growth_series(result: ProjectionResult) -> List[Dict[str, Union[str, int]]]:
    """Invested vs. wealth per year, labelled Y1, Y2, ..."""
    return [
        {"year": f"Y{row.year}", "Invested": row.investedAmount, "Wealth": row.totalValue}
        for row in result.breakdown
    ]


def distribution(result: ProjectionResult) -> List[Dict[str, Union[str, int]]]:
    return [
        {"name": "Invested", "value": result.totalInvested},
        {"name": "Returns", "value": result.totalReturns},
    ]
