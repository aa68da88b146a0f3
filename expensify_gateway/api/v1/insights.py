"""GET /v1/users/{user_id}/insights - financial state, risk and behavior report"""

import time
import logging
from dataclasses import asdict
from datetime import date
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from expensify_gateway.api.v1.schemas import (
    BehaviorReportSchema,
    FinancialStateSchema,
    InsightsResponse,
    RiskAssessmentSchema,
)
from expensify_gateway.api.dependencies import get_request_id, get_today
from expensify_gateway.domain.engine import evaluate_finances
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.infrastructure.database.repositories import FinanceRepository, ProfileRepository
from expensify_gateway.infrastructure.observability.metrics import record_evaluation
from expensify_gateway.infrastructure.observability.logging import log_evaluation

router = APIRouter()


@router.get("/users/{user_id}/insights", response_model=InsightsResponse)
def get_insights(
    user_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    request_id: str = Depends(get_request_id),
):
    """
    Evaluate the user's ledger against their monthly budget.

    Flow:
    1. Load the full ledger and budget
    2. Run state, risk and behavior models against one captured date
    3. Record metrics and a structured log line
    """
    start_time = time.perf_counter()

    try:
        transactions = FinanceRepository(db).list_for_user(user_id)
        monthly_budget = ProfileRepository(db).get_budget(user_id)

        report = evaluate_finances(transactions, monthly_budget, today)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_evaluation(report)
    log_evaluation(
        request_id,
        user_id,
        report.state.safety_level.value,
        report.risk.risk_score,
        report.behavior.category_spikes,
        report.behavior.impulse_pattern_detected,
        report.behavior.abnormal_velocity_detected,
        duration_ms,
    )

    state = asdict(report.state)
    state.pop("day_of_month")
    state.pop("days_in_month")

    return InsightsResponse(
        user_id=user_id,
        monthly_budget=monthly_budget,
        state=FinancialStateSchema(**state),
        risk=RiskAssessmentSchema(**asdict(report.risk)),
        behavior=BehaviorReportSchema(**asdict(report.behavior)),
    )
