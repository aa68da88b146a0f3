"""Ledger endpoints - list, add and delete income/expense entries"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from expensify_gateway.api.v1.schemas import (
    FinanceSummarySchema,
    TransactionCreate,
    TransactionListResponse,
    TransactionSchema,
)
from expensify_gateway.api.dependencies import get_request_id, get_today
from expensify_gateway.config import settings
from expensify_gateway.domain.ledger import summarize_finances
from expensify_gateway.domain.models import Transaction
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.infrastructure.database.repositories import FinanceRepository
from expensify_gateway.infrastructure.observability.metrics import ledger_write_counter

router = APIRouter()


def to_schema(txn: Transaction) -> TransactionSchema:
    return TransactionSchema(
        transaction_id=txn.transaction_id,
        kind=txn.kind,
        description=txn.description,
        amount=txn.amount,
        category=txn.category,
        entry_date=txn.date,
    )


@router.get("/users/{user_id}/finances", response_model=TransactionListResponse)
def list_finances(user_id: str, db: Session = Depends(get_db)):
    """Ledger entries, newest first"""
    transactions = FinanceRepository(db).list_for_user(user_id, limit=settings.history_limit)
    return TransactionListResponse(user_id=user_id, transactions=[to_schema(t) for t in transactions])


@router.post("/users/{user_id}/finances", response_model=TransactionSchema, status_code=201)
def add_finance(
    user_id: str,
    request_body: TransactionCreate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    request_id: str = Depends(get_request_id),
):
    """
    Add an income or expense entry.

    Amount and description are validated by the request schema; the engine
    itself trusts whatever reaches the ledger.
    """
    txn = FinanceRepository(db).add(
        user_id=user_id,
        kind=request_body.kind,
        description=request_body.description,
        amount=request_body.amount,
        entry_date=request_body.entry_date or today,
        category=request_body.category,
    )
    db.commit()

    ledger_write_counter.labels(kind=txn.kind.value).inc()
    logging.info(
        "Ledger entry added",
        extra={"request_id": request_id, "user_id": user_id, "kind": txn.kind.value, "amount": txn.amount},
    )
    return to_schema(txn)


@router.delete("/users/{user_id}/finances/{transaction_id}", status_code=204)
def delete_finance(user_id: str, transaction_id: str, db: Session = Depends(get_db)):
    FinanceRepository(db).delete(user_id, transaction_id)
    db.commit()
    return Response(status_code=204)


@router.get("/users/{user_id}/finances/summary", response_model=FinanceSummarySchema)
def get_finance_summary(
    user_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Today's spend and the current month's income, expense and net"""
    summary = summarize_finances(FinanceRepository(db).list_for_user(user_id), today)
    return FinanceSummarySchema(
        today_spent=summary.today_spent,
        month_income=summary.month_income,
        month_expense=summary.month_expense,
        net=summary.net,
    )
