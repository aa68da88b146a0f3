"""Unit tests for habit streak rules"""

import pytest
from datetime import date, timedelta
from expensify_gateway.domain.exceptions import DuplicateHabitError, InvalidHabitError
from expensify_gateway.domain.habits import create_habit, log_completion, mark_habit_done, reset_habit
from expensify_gateway.domain.models import Habit

TODAY = date(2024, 6, 10)


def test_create_habit_trims_and_starts_empty():
    habit = create_habit([], "  Gym  ")

    assert habit.name == "Gym"
    assert habit.streak == 0
    assert habit.last_done is None
    assert habit.habit_id


def test_create_habit_rejects_duplicate_ignoring_case():
    existing = [Habit(habit_id="1", name="Read")]

    with pytest.raises(DuplicateHabitError):
        create_habit(existing, "read")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_habit_rejects_blank(name):
    with pytest.raises(InvalidHabitError):
        create_habit([], name)


def test_mark_habit_done_first_time():
    habit = Habit(habit_id="1", name="Gym")

    assert mark_habit_done(habit, TODAY) is True
    assert habit.streak == 1
    assert habit.last_done == TODAY


def test_mark_habit_done_consecutive_days_extend_streak():
    habit = Habit(habit_id="1", name="Gym", streak=4, last_done=TODAY - timedelta(days=1))

    mark_habit_done(habit, TODAY)

    assert habit.streak == 5


def test_mark_habit_done_after_gap_restarts():
    habit = Habit(habit_id="1", name="Gym", streak=9, last_done=TODAY - timedelta(days=3))

    mark_habit_done(habit, TODAY)

    assert habit.streak == 1


def test_mark_habit_done_twice_same_day_is_noop():
    habit = Habit(habit_id="1", name="Gym", streak=2, last_done=TODAY)

    assert mark_habit_done(habit, TODAY) is False
    assert habit.streak == 2


def test_mark_habit_done_across_month_boundary():
    habit = Habit(habit_id="1", name="Gym", streak=1, last_done=date(2024, 5, 31))

    mark_habit_done(habit, date(2024, 6, 1))

    assert habit.streak == 2


def test_reset_habit():
    habit = Habit(habit_id="1", name="Gym", streak=7, last_done=TODAY)

    reset_habit(habit)

    assert habit.streak == 0
    assert habit.last_done is None


def test_log_completion_adds_name_once():
    logs = {}
    habit = Habit(habit_id="1", name="Pray")

    log_completion(logs, habit, TODAY)
    log_completion(logs, habit, TODAY)

    assert logs == {TODAY: ["Pray"]}
