"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from rentledger.infrastructure.clients.rentledger_api import RentLedgerClient
from rentledger.utils.date_utils import today_in


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rentledger_client() -> RentLedgerClient:
    """Provide RentLedger API client instance"""
    return RentLedgerClient()


def resolve_today(requested: date | None = None) -> date:
    """Explicit date from the caller, else today in the service timezone"""
    return requested or today_in()
