from __future__ import annotations

from math import isclose

from sipcalc.core.projection import compute, simulate_corpus
from sipcalc.schemas.sip import InvestmentConfig


def test_single_year_delay_costs_everything_but_lumpsum():
    """
    Delaying a one-year plan by a year leaves only the untouched lumpsum.
    """
    result = compute(InvestmentConfig(monthlyInvestment=1000, expectedReturn=12, timePeriod=1, initialLumpsum=10000))

    assert result.costOfDelay == result.totalValue - 10000


def test_delay_matches_shorter_plan():
    config = InvestmentConfig(
        monthlyInvestment=2000, expectedReturn=11, timePeriod=15, stepUpPercentage=5, initialLumpsum=25000
    )
    shorter = compute(config.model_copy(update={"timePeriod": 14}))

    result = compute(config)

    assert abs(result.costOfDelay - (result.totalValue - shorter.totalValue)) <= 1
    assert result.costOfDelay > 0


def test_delay_uses_net_of_fee_rate():
    with_fee = compute(InvestmentConfig(expectedReturn=12, expenseRatio=2, timePeriod=8))
    net_rate = compute(InvestmentConfig(expectedReturn=10, timePeriod=8))

    assert with_fee.costOfDelay == net_rate.costOfDelay


def test_delay_ignores_tax_and_inflation():
    plain = compute(InvestmentConfig(timePeriod=12, taxRate=0, inflationRate=0))
    adjusted = compute(InvestmentConfig(timePeriod=12, taxRate=25, inflationRate=9))

    assert plain.costOfDelay == adjusted.costOfDelay


def test_simulate_corpus_without_years_returns_lumpsum():
    assert simulate_corpus(1000, 12, 0, 10, 5000) == 5000
    assert simulate_corpus(1000, 12, -3, 10, 0) == 0


def test_simulate_corpus_matches_compute():
    config = InvestmentConfig(monthlyInvestment=750, expectedReturn=9, timePeriod=7, stepUpPercentage=3)

    corpus = simulate_corpus(750, 9, 7, 3, 0)

    assert isclose(corpus, compute(config).totalValue, abs_tol=0.5)
