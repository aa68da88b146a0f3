"""Unit tests for ledger summaries and calendar views"""

from datetime import date
from expensify_gateway.domain.ledger import budget_status, calendar_month, day_details, summarize_finances
from expensify_gateway.domain.models import TransactionKind

TODAY = date(2024, 6, 10)


def test_summarize_finances(sample_transactions):
    summary = summarize_finances(sample_transactions, TODAY)

    assert summary.today_spent == 800
    assert summary.month_income == 40000
    assert summary.month_expense == 5000
    assert summary.net == 35000


def test_summarize_finances_empty():
    summary = summarize_finances([], TODAY)

    assert (summary.today_spent, summary.month_income, summary.month_expense, summary.net) == (0, 0, 0, 0)


def test_budget_status_within_budget(sample_transactions):
    status = budget_status(sample_transactions, 8000, TODAY)

    assert status.spent == 5000
    assert status.remaining == 3000
    assert status.exceeded is False
    assert status.over_by == 0


def test_budget_status_exceeded(sample_transactions):
    status = budget_status(sample_transactions, 4000, TODAY)

    assert status.exceeded is True
    assert status.over_by == 1000


def test_budget_status_without_budget(sample_transactions):
    assert budget_status(sample_transactions, None, TODAY) is None
    assert budget_status(sample_transactions, 0, TODAY) is None


def test_calendar_month_covers_every_day(sample_transactions):
    logs = {date(2024, 6, 8): ["Gym", "Read"]}

    days = calendar_month(sample_transactions, logs, 2024, 6)

    assert len(days) == 30
    assert days[0].date == date(2024, 6, 1)
    assert days[0].income == 40000
    assert days[1].spent == 3000
    assert days[7].spent == 1200
    assert days[7].habits == ["Gym", "Read"]
    assert days[29].date == date(2024, 6, 30)
    assert days[29].spent == 0


def test_calendar_month_excludes_other_months(sample_transactions):
    days = calendar_month(sample_transactions, {}, 2024, 5)

    assert len(days) == 31
    assert sum(d.spent for d in days) == 7000
    assert sum(d.income for d in days) == 0


def test_day_details(txn):
    transactions = [
        txn(250, TODAY),
        txn(150, TODAY, category="Transport"),
        txn(1000, TODAY, kind=TransactionKind.INCOME, category="Gift"),
        txn(999, date(2024, 6, 9)),
    ]

    entry = day_details(transactions, {TODAY: ["Gym"]}, TODAY)

    assert entry.spent == 400
    assert entry.income == 1000
    assert entry.habits == ["Gym"]
