"""Monthly budget endpoints"""

from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from expensify_gateway.api.v1.schemas import BudgetStatusResponse, BudgetUpdate
from expensify_gateway.api.dependencies import get_today
from expensify_gateway.domain.ledger import budget_status
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.infrastructure.database.repositories import FinanceRepository, ProfileRepository

router = APIRouter()


def _status_response(user_id: str, db: Session, today: date) -> BudgetStatusResponse:
    monthly_budget = ProfileRepository(db).get_budget(user_id)
    status = budget_status(FinanceRepository(db).list_for_user(user_id), monthly_budget, today)
    if status is None:
        return BudgetStatusResponse(user_id=user_id)

    return BudgetStatusResponse(
        user_id=user_id,
        monthly_budget=status.budget,
        spent=status.spent,
        remaining=status.remaining,
        exceeded=status.exceeded,
        over_by=status.over_by,
    )


@router.get("/users/{user_id}/budget", response_model=BudgetStatusResponse)
def get_budget(user_id: str, db: Session = Depends(get_db), today: date = Depends(get_today)):
    """Current-month spend against the budget"""
    return _status_response(user_id, db, today)


@router.put("/users/{user_id}/budget", response_model=BudgetStatusResponse)
def set_budget(
    user_id: str,
    request_body: BudgetUpdate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    ProfileRepository(db).set_budget(user_id, request_body.monthly_budget)
    db.commit()
    return _status_response(user_id, db, today)
