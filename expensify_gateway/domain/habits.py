"""Habit streak tracking"""

import uuid
from datetime import date
from typing import Dict, List

from expensify_gateway.domain.exceptions import DuplicateHabitError, InvalidHabitError
from expensify_gateway.domain.models import Habit
from expensify_gateway.utils.date_utils import diff_days


def create_habit(existing: List[Habit], name: str) -> Habit:
    """
    Build a new habit with a zero streak.

    Raises:
        InvalidHabitError: Name is blank
        DuplicateHabitError: Name matches an existing habit, ignoring case
    """
    name = (name or "").strip()
    if not name:
        raise InvalidHabitError("Habit name is required")

    if any(h.name.lower() == name.lower() for h in existing):
        raise DuplicateHabitError(f"Habit already exists: {name}")

    return Habit(habit_id=str(uuid.uuid4()), name=name)


def mark_habit_done(habit: Habit, today: date) -> bool:
    """
    Record a completion for today and update the streak.

    Streak rules:
    - First completion ever: 1
    - Last done yesterday: streak + 1
    - Any longer gap: restart at 1

    Returns False when the habit was already done today (nothing changes).
    """
    if habit.last_done == today:
        return False

    if habit.last_done is None:
        habit.streak = 1
    elif diff_days(today, habit.last_done) == 1:
        habit.streak = (habit.streak or 0) + 1
    else:
        habit.streak = 1

    habit.last_done = today
    return True


def reset_habit(habit: Habit) -> None:
    habit.streak = 0
    habit.last_done = None


def log_completion(habit_logs: Dict[date, List[str]], habit: Habit, day: date) -> None:
    """Add the habit name to the day's log once"""
    names = habit_logs.setdefault(day, [])
    if habit.name not in names:
        names.append(habit.name)
