from __future__ import annotations

from math import isclose

from sipcalc.core.projection import compute, round_half_up
from sipcalc.schemas.sip import InvestmentConfig


def test_zero_growth_accumulates_contributions_only():
    """
    With zero return, value should equal the lumpsum plus cumulative contributions (no growth boost).
    """
    config = InvestmentConfig(
        monthlyInvestment=1000, expectedReturn=0, timePeriod=3, initialLumpsum=500, inflationRate=0
    )

    result = compute(config)

    expected_totals = [12500, 24500, 36500]
    for row, expected_total in zip(result.breakdown, expected_totals):
        assert row.investedAmount == expected_total
        assert row.totalValue == expected_total
        assert row.interestEarned == 0
    assert result.totalReturns == 0
    assert result.realValue == result.totalValue
    assert isclose(result.wealthMultiplier, 1.0)


def test_expense_ratio_never_makes_return_negative():
    with_fees = compute(InvestmentConfig(monthlyInvestment=1000, expectedReturn=2, expenseRatio=5, timePeriod=4))
    no_growth = compute(InvestmentConfig(monthlyInvestment=1000, expectedReturn=0, timePeriod=4))

    assert with_fees.breakdown == no_growth.breakdown
    assert with_fees.totalValue == with_fees.totalInvested == 48000


def test_expense_ratio_reduces_value():
    gross = compute(InvestmentConfig(expectedReturn=12))
    net = compute(InvestmentConfig(expectedReturn=12, expenseRatio=1))
    same_rate = compute(InvestmentConfig(expectedReturn=11))

    assert net.totalValue < gross.totalValue
    assert net.totalValue == same_rate.totalValue


def test_step_up_applies_from_following_year():
    config = InvestmentConfig(monthlyInvestment=1000, expectedReturn=0, timePeriod=3, stepUpPercentage=10)

    result = compute(config)

    assert [row.monthlyInvestment for row in result.breakdown] == [1000, 1100, 1210]
    assert [row.investedAmount for row in result.breakdown] == [12000, 25200, 39720]


def test_negative_step_up_is_tolerated():
    result = compute(InvestmentConfig(monthlyInvestment=1000, expectedReturn=0, timePeriod=2, stepUpPercentage=-50))

    assert [row.monthlyInvestment for row in result.breakdown] == [1000, 500]
    assert result.totalInvested == 18000


def test_nothing_invested_gives_zero_ratios():
    result = compute(InvestmentConfig(monthlyInvestment=0, initialLumpsum=0, timePeriod=5, targetAmount=0))

    assert result.totalInvested == 0
    assert result.totalValue == 0
    assert result.absoluteReturnPercentage == 0
    assert result.wealthMultiplier == 0
    assert result.goalAchievedPercentage == 0
    assert all(milestone.year is None for milestone in result.milestones)


def test_zero_years_keeps_lumpsum():
    result = compute(InvestmentConfig(monthlyInvestment=1000, initialLumpsum=2500, timePeriod=0))

    assert result.breakdown == []
    assert result.totalValue == 2500
    assert result.totalInvested == 2500
    assert result.costOfDelay == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.4999) == 0
    assert round_half_up(116169.51) == 116170
