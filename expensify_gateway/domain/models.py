"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class TransactionKind(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class SafetyLevel(str, Enum):
    """Month-end outlook"""

    STABLE = "Stable"
    WARNING = "Warning"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class Transaction:
    """Ledger entry. Amounts are trusted as supplied by the caller."""

    transaction_id: str
    kind: TransactionKind
    description: str
    amount: float
    date: date
    category: str = "Uncategorized"


@dataclass
class FinancialState:
    """Current-month aggregates and burn-rate projection"""

    balance_remaining: float
    daily_burn_rate: float
    projected_end_of_month_balance: float
    safety_level: SafetyLevel
    month_expense_total: float
    month_income_total: float
    evaluated_on: date
    day_of_month: int
    days_in_month: int


@dataclass
class RiskAssessment:
    """Rounded 0-100 risk indicators"""

    overspend_risk: int
    deficit_risk: int
    risk_score: int


@dataclass
class BehaviorReport:
    """Spending patterns over the trailing 7-day window"""

    category_spikes: List[str]
    impulse_pattern_detected: bool
    abnormal_velocity_detected: bool
    recent_transaction_count: int


@dataclass
class FinancialReport:
    """Output of one engine evaluation against a single captured date"""

    state: FinancialState
    risk: RiskAssessment
    behavior: BehaviorReport


@dataclass
class Habit:
    habit_id: str
    name: str
    streak: int = 0
    last_done: Optional[date] = None


@dataclass
class FinanceSummary:
    today_spent: float
    month_income: float
    month_expense: float
    net: float


@dataclass
class BudgetStatus:
    budget: float
    spent: float
    remaining: float
    exceeded: bool
    over_by: float


@dataclass
class CalendarDay:
    """Per-day ledger totals and completed habits"""

    date: date
    spent: float = 0.0
    income: float = 0.0
    habits: List[str] = field(default_factory=list)
