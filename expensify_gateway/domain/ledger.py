"""Ledger summaries for the dashboard, budget banner and calendar"""

from datetime import date
from typing import Dict, List, Optional

from expensify_gateway.domain.models import (
    BudgetStatus,
    CalendarDay,
    FinanceSummary,
    Transaction,
    TransactionKind,
)
from expensify_gateway.utils.date_utils import days_in_month, generate_date_range, is_same_month


def summarize_finances(transactions: List[Transaction], today: date) -> FinanceSummary:
    """Today's spend plus current-month income, expense and net"""
    today_spent = sum(
        t.amount for t in transactions if t.kind == TransactionKind.EXPENSE and t.date == today
    )

    income = 0.0
    expense = 0.0
    for txn in transactions:
        if not is_same_month(txn.date, today):
            continue
        if txn.kind == TransactionKind.INCOME:
            income += txn.amount
        else:
            expense += txn.amount

    return FinanceSummary(
        today_spent=today_spent,
        month_income=income,
        month_expense=expense,
        net=income - expense,
    )


def budget_status(
    transactions: List[Transaction],
    monthly_budget: Optional[float],
    today: date,
) -> Optional[BudgetStatus]:
    """Spent vs. budget for the current month; None when no budget is set"""
    if not monthly_budget or monthly_budget <= 0:
        return None

    spent = sum(
        t.amount
        for t in transactions
        if t.kind == TransactionKind.EXPENSE and is_same_month(t.date, today)
    )
    remaining = monthly_budget - spent

    return BudgetStatus(
        budget=monthly_budget,
        spent=spent,
        remaining=remaining,
        exceeded=remaining < 0,
        over_by=abs(remaining) if remaining < 0 else 0.0,
    )


def calendar_month(
    transactions: List[Transaction],
    habit_logs: Dict[date, List[str]],
    year: int,
    month: int,
) -> List[CalendarDay]:
    """One entry per day of the month with totals and completed habits"""
    first = date(year, month, 1)
    last = date(year, month, days_in_month(year, month))
    days = {
        day: CalendarDay(date=day, habits=list(habit_logs.get(day, [])))
        for day in generate_date_range(first, last)
    }

    for txn in transactions:
        entry = days.get(txn.date)
        if entry is None:
            continue
        if txn.kind == TransactionKind.INCOME:
            entry.income += txn.amount
        else:
            entry.spent += txn.amount

    return list(days.values())


def day_details(
    transactions: List[Transaction],
    habit_logs: Dict[date, List[str]],
    day: date,
) -> CalendarDay:
    entry = CalendarDay(date=day, habits=list(habit_logs.get(day, [])))
    for txn in transactions:
        if txn.date != day:
            continue
        if txn.kind == TransactionKind.INCOME:
            entry.income += txn.amount
        else:
            entry.spent += txn.amount
    return entry
