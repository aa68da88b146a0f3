"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from expensify_gateway.utils.date_utils import reporting_today


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Single clock read per request, in the reporting timezone"""
    return reporting_today()
