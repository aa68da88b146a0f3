"""Data access layer mapping ORM rows to domain models"""

from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from expensify_gateway.infrastructure.database.models import (
    FinanceEntry,
    HabitLogEntry,
    HabitRecord,
    UserProfile,
)
from expensify_gateway.domain.exceptions import HabitNotFoundError, TransactionNotFoundError
from expensify_gateway.domain.models import Habit, Transaction, TransactionKind


def _to_transaction(row: FinanceEntry) -> Transaction:
    return Transaction(
        transaction_id=row.id,
        kind=TransactionKind(row.kind),
        description=row.description,
        amount=row.amount,
        date=row.entry_date,
        category=row.category,
    )


def _to_habit(row: HabitRecord) -> Habit:
    return Habit(habit_id=row.id, name=row.name, streak=row.streak, last_done=row.last_done)


class ProfileRepository:
    """Repository for per-user settings"""

    def __init__(self, db: Session):
        self.db = db

    def get_or_create(self, user_id: str) -> UserProfile:
        """Fetch the user's profile, creating an empty one on first use"""
        profile = self.db.get(UserProfile, user_id)
        if profile is None:
            profile = UserProfile(user_id=user_id, monthly_budget=None)
            self.db.add(profile)
            self.db.flush()
        return profile

    def get_budget(self, user_id: str) -> Optional[float]:
        profile = self.db.get(UserProfile, user_id)
        return profile.monthly_budget if profile else None

    def set_budget(self, user_id: str, monthly_budget: float) -> UserProfile:
        profile = self.get_or_create(user_id)
        profile.monthly_budget = monthly_budget
        self.db.flush()
        return profile


class FinanceRepository:
    """Repository for ledger entries"""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str, limit: int | None = None) -> List[Transaction]:
        """Ledger for a user, newest first"""
        query = (
            self.db.query(FinanceEntry)
            .filter(FinanceEntry.user_id == user_id)
            .order_by(FinanceEntry.entry_date.desc(), FinanceEntry.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [_to_transaction(row) for row in query.all()]

    def add(
        self,
        user_id: str,
        kind: TransactionKind,
        description: str,
        amount: float,
        entry_date: date,
        category: str,
    ) -> Transaction:
        """Persist a ledger entry"""
        ProfileRepository(self.db).get_or_create(user_id)
        row = FinanceEntry(
            user_id=user_id,
            kind=kind.value,
            description=description,
            amount=amount,
            category=category,
            entry_date=entry_date,
        )
        self.db.add(row)
        self.db.flush()  # Get ID without committing
        return _to_transaction(row)

    def delete(self, user_id: str, transaction_id: str) -> None:
        row = (
            self.db.query(FinanceEntry)
            .filter(FinanceEntry.user_id == user_id, FinanceEntry.id == transaction_id)
            .first()
        )
        if row is None:
            raise TransactionNotFoundError(f"Transaction not found: {transaction_id}")
        self.db.delete(row)


class HabitRepository:
    """Repository for habits and the per-day completion log"""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> List[Habit]:
        rows = (
            self.db.query(HabitRecord)
            .filter(HabitRecord.user_id == user_id)
            .order_by(HabitRecord.created_at, HabitRecord.name)
            .all()
        )
        return [_to_habit(row) for row in rows]

    def get(self, user_id: str, habit_id: str) -> Habit:
        return _to_habit(self._get_row(user_id, habit_id))

    def add(self, user_id: str, habit: Habit) -> Habit:
        ProfileRepository(self.db).get_or_create(user_id)
        row = HabitRecord(
            id=habit.habit_id,
            user_id=user_id,
            name=habit.name,
            streak=habit.streak,
            last_done=habit.last_done,
        )
        self.db.add(row)
        self.db.flush()
        return _to_habit(row)

    def save(self, user_id: str, habit: Habit) -> Habit:
        """Write back streak state"""
        row = self._get_row(user_id, habit.habit_id)
        row.streak = habit.streak
        row.last_done = habit.last_done
        self.db.flush()
        return _to_habit(row)

    def delete(self, user_id: str, habit_id: str) -> None:
        self.db.delete(self._get_row(user_id, habit_id))

    def get_logs(self, user_id: str, start: date, end: date) -> Dict[date, List[str]]:
        """Completed habit names keyed by day, for start..end inclusive"""
        rows = (
            self.db.query(HabitLogEntry)
            .filter(
                HabitLogEntry.user_id == user_id,
                HabitLogEntry.log_date >= start,
                HabitLogEntry.log_date <= end,
            )
            .order_by(HabitLogEntry.log_date, HabitLogEntry.habit_name)
            .all()
        )
        logs: Dict[date, List[str]] = {}
        for row in rows:
            logs.setdefault(row.log_date, []).append(row.habit_name)
        return logs

    def save_day_log(self, user_id: str, day: date, names: List[str]) -> None:
        """Persist the day's log, adding names not yet stored"""
        stored = set(self.get_logs(user_id, day, day).get(day, []))
        for name in names:
            if name not in stored:
                self.db.add(HabitLogEntry(user_id=user_id, log_date=day, habit_name=name))
        self.db.flush()

    def _get_row(self, user_id: str, habit_id: str) -> HabitRecord:
        row = (
            self.db.query(HabitRecord)
            .filter(HabitRecord.user_id == user_id, HabitRecord.id == habit_id)
            .first()
        )
        if row is None:
            raise HabitNotFoundError(f"Habit not found: {habit_id}")
        return row
