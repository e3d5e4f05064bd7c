import time
from datetime import date

from lifeatlas.data_model import Account, AccountType, ExpenseRule, IncomeStream
from lifeatlas.engine.financial import compute_net_worth_at_month, compute_projection, find_worst_month

START = date(2024, 1, 1)


def _income(amount, growth=0.0, start=START, end=date(2100, 1, 1)):
    return IncomeStream(id="i1", name="Salary", monthly_amount=amount, start_date=start, end_date=end, annual_growth_rate=growth)


def _expense(amount, inflation=0.0, start=START, end=date(2100, 1, 1)):
    return ExpenseRule(id="e1", name="Living", monthly_amount=amount, start_date=start, end_date=end, annual_inflation_rate=inflation)


def test_full_horizon_projection_is_fast():
    accounts = [
        Account(id="a1", name="Checking", type=AccountType.CHECKING, balance=10000, interest_rate=1),
        Account(id="a2", name="Retirement", type=AccountType.RETIREMENT, balance=50000, interest_rate=7),
    ]
    began = time.perf_counter()

    projections = compute_projection(
        accounts,
        [_income(8000, growth=3, end=date(2059, 12, 31))],
        [_expense(5000, inflation=2.5)],
        START,
        960,
    )

    assert len(projections) == 960
    assert time.perf_counter() - began < 1.0


def test_starting_net_worth_negates_debt_accounts():
    accounts = [
        Account(id="a1", name="Checking", type=AccountType.CHECKING, balance=25000),
        Account(id="a2", name="Card", type=AccountType.DEBT, balance=5000),
    ]

    projections = compute_projection(accounts, [], [], START, 1)

    assert projections[0].net_worth == 20000


def test_empty_inputs_give_zero_tracks():
    projections = compute_projection([], [], [], START, 3)

    assert [p.total_income for p in projections] == [0, 0, 0]
    assert [p.total_expenses for p in projections] == [0, 0, 0]
    assert projections[-1].net_worth == 0


def test_non_positive_month_count_returns_empty_series():
    assert compute_projection([], [], [], START, 0) == []
    assert compute_projection([], [], [], START, -5) == []


def test_income_grows_by_elapsed_years():
    projections = compute_projection([], [_income(1000, growth=12)], [], START, 13)

    assert projections[0].total_income == 1000
    assert projections[12].total_income == 1120


def test_streams_only_count_inside_their_window():
    stream = _income(1000, start=date(2024, 3, 1), end=date(2024, 4, 1))

    projections = compute_projection([], [stream], [], START, 5)

    assert [p.total_income for p in projections] == [0, 0, 1000, 1000, 0]


def test_expense_without_rate_uses_inflation_default():
    projections = compute_projection([], [], [_expense(1000, inflation=None)], START, 13, inflation_default=10)

    assert projections[12].total_expenses == 1100


def test_interest_accrues_on_assets_and_debts():
    savings = compute_projection([Account(id="a", name="Savings", type=AccountType.SAVINGS, balance=12000, interest_rate=12)], [], [], START, 1)
    debt = compute_projection([Account(id="d", name="Loan", type=AccountType.DEBT, balance=1200, interest_rate=12)], [], [], START, 1)

    assert savings[0].net_worth == 12120
    assert debt[0].net_worth == -1212


def test_net_cashflow_accumulates_into_net_worth():
    projections = compute_projection([], [_income(3000)], [_expense(1000)], START, 3)

    assert [p.net_cashflow for p in projections] == [2000, 2000, 2000]
    assert [p.net_worth for p in projections] == [2000, 4000, 6000]


def test_uncertainty_band_widens_every_month():
    projections = compute_projection([], [_income(3000)], [_expense(1000)], START, 960)
    widths = [p.net_worth_high - p.net_worth_low for p in projections]

    assert widths[0] == 1000
    assert all(later > earlier for earlier, later in zip(widths, widths[1:]))


def test_month_labels_follow_the_calendar():
    projections = compute_projection([], [], [], date(2024, 11, 30), 3)

    assert [p.month for p in projections] == ["2024-11", "2024-12", "2025-01"]


def test_net_worth_lookup_and_worst_month():
    stream = _income(500, start=date(2024, 2, 1), end=date(2024, 2, 28))
    projections = compute_projection([], [stream], [_expense(1000)], START, 4)

    assert compute_net_worth_at_month(projections, "2024-02") == -1500
    assert compute_net_worth_at_month(projections, "1999-01") == 0
    # months 0, 2 and 3 tie at -1000; the earliest wins
    assert find_worst_month(projections).month == "2024-01"
    assert find_worst_month([]) is None
