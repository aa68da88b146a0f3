"""Financial decision engine - month state, risk scoring and behavior patterns"""

from collections import defaultdict
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

from expensify_gateway.domain.models import (
    BehaviorReport,
    FinancialReport,
    FinancialState,
    RiskAssessment,
    SafetyLevel,
    Transaction,
    TransactionKind,
)
from expensify_gateway.utils.date_utils import days_in_month, is_same_month, reporting_today, trailing_window

# Safety classification: projected balance below this share of budget is a warning
WARNING_MARGIN = 0.15

# Risk composite weights (velocity favored over projected deficit magnitude)
OVERSPEND_WEIGHT = 0.6
DEFICIT_WEIGHT = 0.4
MAX_RISK = 100

# Behavior model
BEHAVIOR_WINDOW_DAYS = 7
SPIKE_THRESHOLD = 5000  # Absolute currency units per category, not budget-relative
IMPULSE_MIN = 100
IMPULSE_MAX = 1000
IMPULSE_COUNT_TRIGGER = 5
VELOCITY_MULTIPLIER = 2
VELOCITY_FLOOR = 1000


def _has_budget(monthly_budget: Optional[float]) -> bool:
    return monthly_budget is not None and monthly_budget > 0


def _round_half_up(value: float) -> int:
    # Exact decimal expansion so values just under .5 round down
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _month_total(transactions: Iterable[Transaction], kind: TransactionKind, today: date) -> float:
    return sum(t.amount for t in transactions if t.kind == kind and is_same_month(t.date, today))


def calculate_state(
    transactions: List[Transaction],
    monthly_budget: Optional[float],
    today: date | None = None,
) -> FinancialState:
    """
    Aggregate current-month spend/income and project the month-end balance.

    Safety level (first match wins):
    - projected balance < 0:                 Critical
    - projected balance < 15% of budget:     Warning
    - otherwise:                             Stable

    With no budget (None or 0) there is nothing to compare against, so the
    level is always Stable.
    """
    if today is None:
        today = reporting_today()

    budget = monthly_budget or 0
    month_days = days_in_month(today.year, today.month)
    day_of_month = today.day

    month_expenses = _month_total(transactions, TransactionKind.EXPENSE, today)
    month_income = _month_total(transactions, TransactionKind.INCOME, today)

    burn_rate = month_expenses / day_of_month if day_of_month > 0 else 0.0
    projected = budget - burn_rate * month_days

    safety_level = SafetyLevel.STABLE
    if _has_budget(monthly_budget):
        if projected < 0:
            safety_level = SafetyLevel.CRITICAL
        elif projected < budget * WARNING_MARGIN:
            safety_level = SafetyLevel.WARNING

    return FinancialState(
        balance_remaining=budget - month_expenses,
        daily_burn_rate=burn_rate,
        projected_end_of_month_balance=projected,
        safety_level=safety_level,
        month_expense_total=month_expenses,
        month_income_total=month_income,
        evaluated_on=today,
        day_of_month=day_of_month,
        days_in_month=month_days,
    )


def run_risk_engine(state: FinancialState, monthly_budget: Optional[float]) -> RiskAssessment:
    """
    Score overspend and deficit risk from 0 (safe) to 100.

    - overspend: budget used % minus month elapsed %, floored at 0
    - deficit:   projected shortfall as % of budget, capped at 100
    - composite: 60% overspend + 40% deficit, capped at 100

    Day-of-month comes from the state so both share one evaluation date.
    Values are rounded only on return.
    """
    if not _has_budget(monthly_budget):
        return RiskAssessment(overspend_risk=0, deficit_risk=0, risk_score=0)

    budget_used_percent = state.month_expense_total / monthly_budget * 100
    days_passed_percent = state.day_of_month / state.days_in_month * 100

    overspend_risk = min(MAX_RISK, max(0.0, budget_used_percent - days_passed_percent))

    deficit_risk = 0.0
    if state.projected_end_of_month_balance < 0:
        deficit_risk = min(MAX_RISK, abs(state.projected_end_of_month_balance) / monthly_budget * 100)

    risk_score = min(MAX_RISK, overspend_risk * OVERSPEND_WEIGHT + deficit_risk * DEFICIT_WEIGHT)

    return RiskAssessment(
        overspend_risk=_round_half_up(overspend_risk),
        deficit_risk=_round_half_up(deficit_risk),
        risk_score=_round_half_up(risk_score),
    )


def run_behavior_model(transactions: List[Transaction], today: date | None = None) -> BehaviorReport:
    """
    Detect spending patterns over the 7 calendar days ending today.

    - Category spike: category total strictly above SPIKE_THRESHOLD
    - Impulse pattern: more than 5 expenses strictly between 100 and 1000
    - Abnormal velocity: today's spend above twice the daily average and above 1000

    The daily average always divides by the full window length, even when
    some days have no expenses.
    """
    if today is None:
        today = reporting_today()

    window = set(trailing_window(today, BEHAVIOR_WINDOW_DAYS))
    recent = [t for t in transactions if t.kind == TransactionKind.EXPENSE and t.date in window]

    category_totals: Dict[str, float] = defaultdict(float)
    for txn in recent:
        category_totals[txn.category] += txn.amount
    spikes = sorted(cat for cat, total in category_totals.items() if total > SPIKE_THRESHOLD)

    impulse_count = sum(1 for t in recent if IMPULSE_MIN < t.amount < IMPULSE_MAX)

    today_spend = sum(t.amount for t in recent if t.date == today)
    average_daily = sum(t.amount for t in recent) / BEHAVIOR_WINDOW_DAYS
    abnormal_velocity = today_spend > average_daily * VELOCITY_MULTIPLIER and today_spend > VELOCITY_FLOOR

    return BehaviorReport(
        category_spikes=spikes,
        impulse_pattern_detected=impulse_count > IMPULSE_COUNT_TRIGGER,
        abnormal_velocity_detected=abnormal_velocity,
        recent_transaction_count=len(recent),
    )


def evaluate_finances(
    transactions: List[Transaction],
    monthly_budget: Optional[float],
    today: date | None = None,
) -> FinancialReport:
    """
    Main entry point: run all three models against one captured date.
    """
    if today is None:
        today = reporting_today()

    state = calculate_state(transactions, monthly_budget, today)
    return FinancialReport(
        state=state,
        risk=run_risk_engine(state, monthly_budget),
        behavior=run_behavior_model(transactions, today),
    )
