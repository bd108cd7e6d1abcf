"""
Report API endpoints.

Every endpoint takes the same period parameters (see
dependencies.get_period). A journal line pointing at an unknown
account aborts the report with 422: the stored data is
inconsistent and a partial statement would be misleading.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from erp_ledger.api.dependencies import get_period, get_report_service
from erp_ledger.exceptions import AccountReferenceError, LedgerError
from erp_ledger.schemas.reports import (
    BalanceSheet,
    IncomeStatement,
    PeriodReport,
    ReportPeriod,
    StatementTotals,
    TrialBalance,
)
from erp_ledger.services.report_service import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


def _run(build, period: ReportPeriod):
    try:
        return build(period)
    except AccountReferenceError as e:
        logger.error(
            "Report for %s aborted: transaction %s references unknown account %s",
            period.label,
            e.transaction_id,
            e.account_id,
        )
        raise HTTPException(status_code=422, detail=str(e))
    except LedgerError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/statement", response_model=PeriodReport[StatementTotals])
def get_statement(
    period: ReportPeriod = Depends(get_period),
    service: ReportService = Depends(get_report_service),
):
    """
    Summary totals: revenue, expenses, net profit, assets,
    liabilities, equity and whether the books balance.
    """
    return _run(service.statement, period)


@router.get("/trial-balance", response_model=PeriodReport[TrialBalance])
def get_trial_balance(
    period: ReportPeriod = Depends(get_period),
    service: ReportService = Depends(get_report_service),
):
    return _run(service.trial_balance, period)


@router.get("/income-statement", response_model=PeriodReport[IncomeStatement])
def get_income_statement(
    period: ReportPeriod = Depends(get_period),
    service: ReportService = Depends(get_report_service),
):
    return _run(service.income_statement, period)


@router.get("/balance-sheet", response_model=PeriodReport[BalanceSheet])
def get_balance_sheet(
    period: ReportPeriod = Depends(get_period),
    service: ReportService = Depends(get_report_service),
):
    return _run(service.balance_sheet, period)
