"""
Ledger API endpoints.

Read-only views of the chart of accounts and of individual
account balances. The API layer is thin: it maps errors to
status codes and delegates everything else to ReportService.
"""

import datetime

from fastapi import APIRouter, Depends, HTTPException

from erp_ledger.exceptions import AccountNotFoundError
from erp_ledger.models.enums import AccountType
from erp_ledger.schemas.ledger import Account, AccountBalance, AccountLedger
from erp_ledger.api.dependencies import get_report_service
from erp_ledger.services.report_service import ReportService

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("/accounts", response_model=list[Account])
def list_accounts(
    account_type: AccountType | None = None,
    service: ReportService = Depends(get_report_service),
):
    """List the chart of accounts in catalog order, optionally by type."""
    catalog = service.catalog()
    if account_type is None:
        return list(catalog)
    return catalog.list_by_type(account_type)


@router.get("/accounts/{account_id}", response_model=Account)
def get_account(
    account_id: str,
    service: ReportService = Depends(get_report_service),
):
    try:
        return service.catalog().lookup(account_id)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/accounts/{account_id}/balance",
    response_model=AccountBalance,
)
def get_account_balance(
    account_id: str,
    start: datetime.date | None = None,
    end: datetime.date | None = None,
    service: ReportService = Depends(get_report_service),
):
    """
    Get an account's balance, over the whole journal or a date range.

    Balance is derived from journal lines, never stored.
    """
    try:
        return service.account_balance(account_id, start, end)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/accounts/{account_id}/entries",
    response_model=AccountLedger,
)
def get_account_entries(
    account_id: str,
    start: datetime.date | None = None,
    end: datetime.date | None = None,
    service: ReportService = Depends(get_report_service),
):
    """Get the account's postings, oldest first, with a running balance."""
    try:
        return service.account_ledger(account_id, start, end)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
