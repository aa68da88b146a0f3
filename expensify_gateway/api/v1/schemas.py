"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from datetime import date
from typing import List, Optional

from expensify_gateway.domain.models import SafetyLevel, TransactionKind


class TransactionCreate(BaseModel):
    """Request body for POST /v1/users/{user_id}/finances"""

    kind: TransactionKind = TransactionKind.EXPENSE
    description: str = Field(..., min_length=1, description="What the money was for")
    amount: float = Field(..., gt=0, allow_inf_nan=False, description="Positive amount in the user's currency")
    category: str = Field("Uncategorized", min_length=1)
    entry_date: Optional[date] = Field(None, description="Defaults to today in the reporting timezone")

    @field_validator("description", "category")
    @classmethod
    def strip_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class TransactionSchema(BaseModel):
    """Single ledger entry"""

    transaction_id: str
    kind: TransactionKind
    description: str
    amount: float
    category: str
    entry_date: date


class TransactionListResponse(BaseModel):
    user_id: str
    transactions: List[TransactionSchema]


class FinanceSummarySchema(BaseModel):
    """Response for GET /v1/users/{user_id}/finances/summary"""

    today_spent: float
    month_income: float
    month_expense: float
    net: float


class BudgetUpdate(BaseModel):
    """Request body for PUT /v1/users/{user_id}/budget"""

    monthly_budget: float = Field(..., gt=0, allow_inf_nan=False)


class BudgetStatusResponse(BaseModel):
    """Budget banner; all amounts null when no budget is set"""

    user_id: str
    monthly_budget: Optional[float] = None
    spent: Optional[float] = None
    remaining: Optional[float] = None
    exceeded: bool = False
    over_by: Optional[float] = None


class FinancialStateSchema(BaseModel):
    balance_remaining: float
    daily_burn_rate: float
    projected_end_of_month_balance: float
    safety_level: SafetyLevel
    month_expense_total: float
    month_income_total: float
    evaluated_on: date


class RiskAssessmentSchema(BaseModel):
    overspend_risk: int = Field(..., ge=0, le=100)
    deficit_risk: int = Field(..., ge=0, le=100)
    risk_score: int = Field(..., ge=0, le=100)


class BehaviorReportSchema(BaseModel):
    category_spikes: List[str]
    impulse_pattern_detected: bool
    abnormal_velocity_detected: bool
    recent_transaction_count: int


class InsightsResponse(BaseModel):
    """Response for GET /v1/users/{user_id}/insights"""

    user_id: str
    monthly_budget: Optional[float] = None
    state: FinancialStateSchema
    risk: RiskAssessmentSchema
    behavior: BehaviorReportSchema


class HabitCreate(BaseModel):
    name: str = Field(..., description="Habit name, unique per user ignoring case")


class HabitSchema(BaseModel):
    habit_id: str
    name: str
    streak: int
    last_done: Optional[date] = None
    done_today: bool = False


class HabitListResponse(BaseModel):
    user_id: str
    habits: List[HabitSchema]


class CalendarDaySchema(BaseModel):
    day: date
    spent: float
    income: float
    habits: List[str]


class CalendarMonthResponse(BaseModel):
    """Response for GET /v1/users/{user_id}/calendar"""

    user_id: str
    year: int
    month: int
    days: List[CalendarDaySchema]
