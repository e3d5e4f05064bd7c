from datetime import date

import pytest

from lifeatlas.data_model import DebtPlan, DebtStrategy
from lifeatlas.engine.debt import StrategyMode, compare_strategies, compute_debt_payoff, resolve_strategy_mode

START = date(2024, 1, 1)


def make_debt(
    debt_id="d1",
    balance=1000.0,
    rate=0.0,
    minimum=100.0,
    strategy=DebtStrategy.MINIMUM_PAYMENT,
    extra=0.0,
    monthly_payment=0.0,
    start=START,
):
    return DebtPlan(
        id=debt_id,
        name=debt_id.upper(),
        principal_balance=balance,
        annual_interest_rate=rate,
        minimum_payment=minimum,
        start_date=start,
        monthly_payment=monthly_payment,
        extra_payment=extra,
        strategy=strategy,
    )


def _entries(result, debt_id):
    return [entry for entry in result.schedule if entry.debt_id == debt_id]


def test_empty_plan_list_returns_empty_result():
    result = compute_debt_payoff([])

    assert result.schedule == []
    assert result.summaries == []
    assert result.total_paid == 0
    assert result.last_payoff_date == ""


def test_minimum_covering_balance_pays_off_in_one_month():
    result = compute_debt_payoff([make_debt(balance=800, minimum=1000)])

    summary = result.summaries[0]
    assert summary.months_to_payoff == 1
    assert summary.total_interest_paid == 0
    assert summary.total_paid == 800
    assert summary.payoff_date == "2024-01"
    assert result.schedule[-1].is_paid_off


def test_minimum_payment_strategy_amortizes_linearly_without_interest():
    result = compute_debt_payoff([make_debt(balance=1000, minimum=100)])

    assert len(result.schedule) == 10
    assert result.summaries[0].payoff_date == "2024-10"
    assert [e.ending_balance for e in result.schedule[:3]] == [900, 800, 700]


def test_fixed_payment_adds_difference_over_minimum():
    debt = make_debt(balance=1000, minimum=50, monthly_payment=200, strategy=DebtStrategy.FIXED_PAYMENT)

    result = compute_debt_payoff([debt])

    assert result.mode == StrategyMode.PER_DEBT
    assert result.schedule[0].payment == 200
    assert result.summaries[0].months_to_payoff == 5


def test_snowball_targets_smallest_balance():
    small = make_debt("a", balance=500, rate=10, minimum=50, extra=100, strategy=DebtStrategy.SNOWBALL)
    large = make_debt("b", balance=2000, rate=20, minimum=50, strategy=DebtStrategy.SNOWBALL)

    result = compute_debt_payoff([small, large])

    assert result.mode == StrategyMode.POOLED_SNOWBALL
    assert _entries(result, "a")[0].payment == 150
    assert _entries(result, "b")[0].payment == 50
    summaries = {s.debt_id: s for s in result.summaries}
    assert summaries["a"].months_to_payoff < summaries["b"].months_to_payoff


def test_avalanche_targets_highest_rate():
    small = make_debt("a", balance=500, rate=10, minimum=50, extra=100, strategy=DebtStrategy.AVALANCHE)
    large = make_debt("b", balance=2000, rate=20, minimum=50, strategy=DebtStrategy.AVALANCHE)

    result = compute_debt_payoff([small, large])

    assert result.mode == StrategyMode.POOLED_AVALANCHE
    assert _entries(result, "a")[0].payment == 50
    assert _entries(result, "b")[0].payment == 150


def test_pooling_includes_extra_from_non_pooled_debts():
    plain = make_debt("a", balance=5000, rate=5, minimum=50, extra=100, strategy=DebtStrategy.MINIMUM_PAYMENT)
    pooled = make_debt("b", balance=5000, rate=20, minimum=50, strategy=DebtStrategy.AVALANCHE)

    result = compute_debt_payoff([plain, pooled])

    assert resolve_strategy_mode([plain, pooled]) == StrategyMode.POOLED_AVALANCHE
    assert _entries(result, "a")[0].payment == 50
    assert _entries(result, "b")[0].payment == 150


def test_strategy_mode_follows_first_pooled_debt():
    plans = [
        make_debt("a", strategy=DebtStrategy.FIXED_PAYMENT),
        make_debt("b", strategy=DebtStrategy.SNOWBALL),
        make_debt("c", strategy=DebtStrategy.AVALANCHE),
    ]

    assert resolve_strategy_mode(plans) == StrategyMode.POOLED_SNOWBALL
    assert resolve_strategy_mode(plans[:1]) == StrategyMode.PER_DEBT


def test_freed_minimums_roll_into_the_pool():
    first = make_debt("a", balance=100, minimum=100, strategy=DebtStrategy.SNOWBALL)
    second = make_debt("b", balance=1000, minimum=100, extra=50, strategy=DebtStrategy.SNOWBALL)

    result = compute_debt_payoff([first, second])

    b_entries = _entries(result, "b")
    assert b_entries[0].payment == 150
    assert b_entries[1].payment == 250
    assert b_entries[1].ending_balance == 600


def test_safety_cap_stops_runaway_debts():
    debt = make_debt(balance=10000, rate=24, minimum=100)

    result = compute_debt_payoff([debt], max_months=12)

    assert len(result.schedule) == 12
    assert result.summaries[0].months_to_payoff == 0
    assert result.summaries[0].payoff_date == ""
    assert result.last_payoff_date == ""


def test_later_debt_is_processed_after_earlier_one_is_cleared():
    early = make_debt("a", balance=100, minimum=100)
    late = make_debt("b", balance=200, minimum=200, start=date(2024, 6, 1))

    result = compute_debt_payoff([early, late])

    summaries = {s.debt_id: s for s in result.summaries}
    assert summaries["a"].payoff_date == "2024-01"
    assert summaries["b"].payoff_date == "2024-06"
    assert summaries["b"].months_to_payoff == 6
    assert result.last_payoff_date == "2024-06"


def test_schedule_entries_balance_and_totals_accumulate():
    plans = [
        make_debt("a", balance=3000, rate=18, minimum=90, extra=150, strategy=DebtStrategy.AVALANCHE),
        make_debt("b", balance=7000, rate=6, minimum=140),
    ]

    result = compute_debt_payoff(plans)

    for debt_id in ("a", "b"):
        entries = _entries(result, debt_id)
        interest_total = paid_total = 0.0
        for entry in entries:
            assert entry.starting_balance + entry.interest_charged - entry.payment == pytest.approx(entry.ending_balance, abs=0.02)
            assert entry.interest_charged >= 0
            assert entry.payment >= 0
            interest_total += entry.interest_charged
            paid_total += entry.payment
        assert entries[-1].is_paid_off
        summary = next(s for s in result.summaries if s.debt_id == debt_id)
        assert entries[-1].month == summary.payoff_date
        assert paid_total == pytest.approx(summary.total_paid, abs=0.05 * len(entries))
    assert result.total_paid == pytest.approx(sum(s.total_paid for s in result.summaries), abs=0.01)


def test_compare_strategies_tabulates_each_strategy():
    plans = [
        make_debt("a", balance=500, rate=10, minimum=50, extra=100),
        make_debt("b", balance=2000, rate=20, minimum=50),
    ]

    table = compare_strategies(plans)

    assert list(table["Strategy"]) == [s.value for s in DebtStrategy]
    assert table["AllPaidOff"].all()
    by_strategy = table.set_index("Strategy")
    assert by_strategy.loc["avalanche", "TotalInterestPaid"] <= by_strategy.loc["snowball", "TotalInterestPaid"]
    assert by_strategy.loc["avalanche", "MonthsToPayoff"] < by_strategy.loc["minimum-payment", "MonthsToPayoff"]


def test_freed_minimums_roll_over_without_any_extra():
    first = make_debt("a", balance=100, minimum=100, strategy=DebtStrategy.SNOWBALL)
    second = make_debt("b", balance=1000, minimum=100, strategy=DebtStrategy.SNOWBALL)

    result = compute_debt_payoff([first, second])

    b_entries = _entries(result, "b")
    assert [e.payment for e in b_entries[:3]] == [100, 200, 200]
    assert b_entries[2].ending_balance == 500
    assert result.summaries[1].months_to_payoff == 6
