"""Habit endpoints - create, complete, reset and delete"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expensify_gateway.api.v1.schemas import HabitCreate, HabitListResponse, HabitSchema
from expensify_gateway.api.dependencies import get_today
from expensify_gateway.domain.habits import create_habit, log_completion, mark_habit_done, reset_habit
from expensify_gateway.domain.models import Habit
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.infrastructure.database.repositories import HabitRepository

router = APIRouter()


def to_schema(habit: Habit, today: date) -> HabitSchema:
    return HabitSchema(
        habit_id=habit.habit_id,
        name=habit.name,
        streak=habit.streak,
        last_done=habit.last_done,
        done_today=habit.last_done == today,
    )


@router.get("/users/{user_id}/habits", response_model=HabitListResponse)
def list_habits(user_id: str, db: Session = Depends(get_db), today: date = Depends(get_today)):
    habits = HabitRepository(db).list_for_user(user_id)
    return HabitListResponse(user_id=user_id, habits=[to_schema(h, today) for h in habits])


@router.post("/users/{user_id}/habits", response_model=HabitSchema, status_code=201)
def add_habit(
    user_id: str,
    request_body: HabitCreate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Create a habit; 409 on a case-insensitive duplicate name"""
    repo = HabitRepository(db)
    habit = repo.add(user_id, create_habit(repo.list_for_user(user_id), request_body.name))
    db.commit()
    return to_schema(habit, today)


@router.post("/users/{user_id}/habits/{habit_id}/done", response_model=HabitSchema)
def complete_habit(
    user_id: str,
    habit_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Mark a habit done for today.

    Repeating the call on the same day leaves the streak unchanged, including
    when a concurrent call already logged the completion.
    """
    repo = HabitRepository(db)
    habit = repo.get(user_id, habit_id)

    if mark_habit_done(habit, today):
        habit_logs = repo.get_logs(user_id, today, today)
        log_completion(habit_logs, habit, today)
        try:
            repo.save(user_id, habit)
            repo.save_day_log(user_id, today, habit_logs[today])
            db.commit()
        except IntegrityError:
            db.rollback()
            logging.warning(
                "Habit already logged today",
                extra={"user_id": user_id, "habit_id": habit_id, "log_date": today.isoformat()},
            )
            habit = repo.get(user_id, habit_id)

    return to_schema(habit, today)


@router.post("/users/{user_id}/habits/{habit_id}/reset", response_model=HabitSchema)
def reset(
    user_id: str,
    habit_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    repo = HabitRepository(db)
    habit = repo.get(user_id, habit_id)
    reset_habit(habit)
    repo.save(user_id, habit)
    db.commit()
    return to_schema(habit, today)


@router.delete("/users/{user_id}/habits/{habit_id}", status_code=204)
def delete_habit(user_id: str, habit_id: str, db: Session = Depends(get_db)):
    HabitRepository(db).delete(user_id, habit_id)
    db.commit()
    return Response(status_code=204)
