"""Data contracts for SIP projections."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class InvestmentConfig(BaseModel):
    """Inputs for a single projection run.

    Rates are percentages (12 means 12%). No ranges are enforced here: the
    engine accepts whatever the caller passes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    monthlyInvestment: float = 500
    expectedReturn: float = 12
    timePeriod: int = 10
    stepUpPercentage: float = 0
    inflationRate: float = 6
    initialLumpsum: float = 0
    expenseRatio: float = 0
    taxRate: float = 0
    targetAmount: float = 0


# (min, max) per field, matching the calculator's input sliders.
INPUT_RANGES: Dict[str, tuple[float, float]] = {
    "monthlyInvestment": (100, 100_000),
    "expectedReturn": (1, 30),
    "timePeriod": (1, 40),
    "stepUpPercentage": (0, 50),
    "inflationRate": (0, 20),
    "initialLumpsum": (0, 1_000_000),
    "expenseRatio": (0, 5),
    "taxRate": (0, 30),
    "targetAmount": (0, 50_000_000),
}


class InvestmentRequest(InvestmentConfig):
    """Validated request body for the HTTP layer."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    monthlyInvestment: float = Field(500, ge=100, le=100_000)
    expectedReturn: float = Field(12, ge=1, le=30)
    timePeriod: int = Field(10, ge=1, le=40)
    stepUpPercentage: float = Field(0, ge=0, le=50)
    inflationRate: float = Field(6, ge=0, le=20)
    initialLumpsum: float = Field(0, ge=0, le=1_000_000)
    expenseRatio: float = Field(0, ge=0, le=5)
    taxRate: float = Field(0, ge=0, le=30)
    targetAmount: float = Field(0, ge=0, le=50_000_000)

    @classmethod
    def clamp(cls, raw: Mapping[str, Any]) -> "InvestmentRequest":
        """Build a request with every known numeric field pulled into range."""
        values: Dict[str, Any] = dict(raw)
        for name, (low, high) in INPUT_RANGES.items():
            if name not in values:
                continue
            value = float(values[name])
            values[name] = min(max(value, low), high)
        if "timePeriod" in values:
            values["timePeriod"] = int(round(values["timePeriod"]))
        return cls.model_validate(values)

    def to_config(self) -> InvestmentConfig:
        return InvestmentConfig.model_validate(self.model_dump())


class YearlyRecord(BaseModel):
    """One simulated year, all amounts rounded to whole units."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    investedAmount: int
    totalValue: int
    interestEarned: int
    monthlyInvestment: int


class Milestone(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    threshold: int
    year: Optional[int] = None


class ProjectionResult(BaseModel):
    """Everything the engine derives from one InvestmentConfig."""

    model_config = ConfigDict(frozen=True)

    totalInvested: int
    totalReturns: int
    totalValue: int
    postTaxValue: int
    realValue: int
    breakdown: List[YearlyRecord]
    costOfDelay: int
    milestones: List[Milestone]
    absoluteReturnPercentage: float
    wealthMultiplier: float
    goalAchievedPercentage: float
    goalShortfall: float = 0.0

    def milestone_year(self, label: str) -> Optional[int]:
        for milestone in self.milestones:
            if milestone.label == label:
                return milestone.year
        raise KeyError(label)
