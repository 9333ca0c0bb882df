"""SIP projection engine.

Order of operations (per month, annuity-due):
  1) Add the month's contribution at the START of the month.
  2) Compound the whole balance for one month.

The contribution steps up once a year, after that year's row is recorded, so
the new amount only applies from the following year.
"""

from __future__ import annotations

import math
from typing import Iterator, List, NamedTuple

from sipcalc.schemas.sip import InvestmentConfig, Milestone, ProjectionResult, YearlyRecord

MONTHS_PER_YEAR = 12

# (threshold, label), ascending
MILESTONES: List[tuple[int, str]] = [
    (100_000, "100k"),
    (1_000_000, "1 Million"),
    (5_000_000, "5 Million"),
    (10_000_000, "10 Million"),
    (100_000_000, "100 Million"),
]


class YearState(NamedTuple):
    year: int
    corpus: float
    invested: float
    monthly_investment: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def effective_annual_rate(expected_return: float, expense_ratio: float) -> float:
    # fees never push the return below zero
    return max(0.0, expected_return - expense_ratio)


def iter_years(
    monthly_investment: float,
    annual_rate: float,
    years: int,
    step_up: float,
    lumpsum: float,
) -> Iterator[YearState]:
    """Yield the running state at the end of each simulated year.

    ``monthly_investment`` in each yielded state is the contribution that was
    active during that year.
    """
    monthly_rate = annual_rate / MONTHS_PER_YEAR / 100
    corpus = float(lumpsum)
    invested = float(lumpsum)
    current = float(monthly_investment)

    for year in range(1, years + 1):
        for _ in range(MONTHS_PER_YEAR):
            corpus = (corpus + current) * (1 + monthly_rate)
            invested += current

        yield YearState(year=year, corpus=corpus, invested=invested, monthly_investment=current)

        current *= 1 + step_up / 100


def simulate_corpus(
    monthly_investment: float,
    annual_rate: float,
    years: int,
    step_up: float,
    lumpsum: float,
) -> float:
    """Final corpus of a plain run (no tax, no inflation).

    ``years <= 0`` runs nothing and returns the lumpsum.
    """
    corpus = float(lumpsum)
    for state in iter_years(monthly_investment, annual_rate, years, step_up, lumpsum):
        corpus = state.corpus
    return corpus


def cost_of_delay(config: InvestmentConfig, total_value: int) -> int:
    """Nominal value lost by starting the same plan one year later."""
    delayed = simulate_corpus(
        config.monthlyInvestment,
        effective_annual_rate(config.expectedReturn, config.expenseRatio),
        config.timePeriod - 1,
        config.stepUpPercentage,
        config.initialLumpsum,
    )
    return round_half_up(total_value - delayed)


def find_milestones(breakdown: List[YearlyRecord]) -> List[Milestone]:
    milestones: List[Milestone] = []
    for threshold, label in MILESTONES:
        hit = next((row for row in breakdown if row.totalValue >= threshold), None)
        milestones.append(
            Milestone(label=label, threshold=threshold, year=hit.year if hit else None)
        )
    return milestones


def compute(config: InvestmentConfig) -> ProjectionResult:
    """Project a SIP over ``config.timePeriod`` years."""
    annual_rate = effective_annual_rate(config.expectedReturn, config.expenseRatio)

    corpus = float(config.initialLumpsum)
    invested = float(config.initialLumpsum)
    breakdown: List[YearlyRecord] = []

    for state in iter_years(
        config.monthlyInvestment,
        annual_rate,
        config.timePeriod,
        config.stepUpPercentage,
        config.initialLumpsum,
    ):
        corpus, invested = state.corpus, state.invested
        breakdown.append(
            YearlyRecord(
                year=state.year,
                investedAmount=round_half_up(state.invested),
                totalValue=round_half_up(state.corpus),
                interestEarned=round_half_up(state.corpus - state.invested),
                monthlyInvestment=round_half_up(state.monthly_investment),
            )
        )

    total_value = round_half_up(corpus)
    total_returns = round_half_up(total_value - invested)

    # gains only; a negative return gives a negative tax
    tax_amount = total_returns * (config.taxRate / 100)
    post_tax_value = round_half_up(total_value - tax_amount)

    inflation_factor = (1 + config.inflationRate / 100) ** config.timePeriod
    real_value = round_half_up(post_tax_value / inflation_factor)

    if invested > 0:
        absolute_return = total_returns / invested * 100
        multiplier = total_value / invested
    else:
        absolute_return = 0.0
        multiplier = 0.0

    if config.targetAmount > 0:
        goal_pct = min(100.0, post_tax_value / config.targetAmount * 100)
        shortfall = config.targetAmount - post_tax_value if goal_pct < 100 else 0.0
    else:
        goal_pct = 0.0
        shortfall = 0.0

    return ProjectionResult(
        totalInvested=round_half_up(invested),
        totalReturns=total_returns,
        totalValue=total_value,
        postTaxValue=post_tax_value,
        realValue=real_value,
        breakdown=breakdown,
        costOfDelay=cost_of_delay(config, total_value),
        milestones=find_milestones(breakdown),
        absoluteReturnPercentage=absolute_return,
        wealthMultiplier=multiplier,
        goalAchievedPercentage=goal_pct,
        goalShortfall=shortfall,
    )


__all__ = [
    "MILESTONES",
    "YearState",
    "round_half_up",
    "effective_annual_rate",
    "iter_years",
    "simulate_corpus",
    "cost_of_delay",
    "find_milestones",
    "compute",
]
