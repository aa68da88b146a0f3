"""Calendar endpoints - per-day spend, income and completed habits"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from expensify_gateway.api.v1.schemas import CalendarDaySchema, CalendarMonthResponse
from expensify_gateway.api.dependencies import get_today
from expensify_gateway.domain.ledger import calendar_month, day_details
from expensify_gateway.domain.models import CalendarDay
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.infrastructure.database.repositories import FinanceRepository, HabitRepository
from expensify_gateway.utils.date_utils import days_in_month

router = APIRouter()


def to_schema(entry: CalendarDay) -> CalendarDaySchema:
    return CalendarDaySchema(day=entry.date, spent=entry.spent, income=entry.income, habits=entry.habits)


@router.get("/users/{user_id}/calendar", response_model=CalendarMonthResponse)
def get_calendar_month(
    user_id: str,
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Month grid; defaults to the current month"""
    year = year or today.year
    month = month or today.month

    first = date(year, month, 1)
    last = date(year, month, days_in_month(year, month))
    habit_logs = HabitRepository(db).get_logs(user_id, first, last)
    days = calendar_month(FinanceRepository(db).list_for_user(user_id), habit_logs, year, month)

    return CalendarMonthResponse(user_id=user_id, year=year, month=month, days=[to_schema(d) for d in days])


@router.get("/users/{user_id}/calendar/{day}", response_model=CalendarDaySchema)
def get_day_details(user_id: str, day: date, db: Session = Depends(get_db)):
    habit_logs = HabitRepository(db).get_logs(user_id, day, day)
    return to_schema(day_details(FinanceRepository(db).list_for_user(user_id), habit_logs, day))
