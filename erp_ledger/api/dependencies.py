"""
Shared FastAPI dependencies.

Every report endpoint gets a ReportService bound to the request's
database session, and a reporting period built from the query
string.
"""

import datetime

from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from erp_ledger.exceptions import LedgerError
from erp_ledger.models.base import get_db
from erp_ledger.schemas.reports import ReportPeriod
from erp_ledger.services.ledger_store import LedgerStore
from erp_ledger.services.periods import custom_period, resolve_period
from erp_ledger.services.report_service import ReportService


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(LedgerStore(db))


def get_period(
    period: str | None = Query(
        default=None,
        description="Preset such as this_month, last_year or last_6_months",
    ),
    start: datetime.date | None = None,
    end: datetime.date | None = None,
) -> ReportPeriod:
    """
    Resolve the reporting period from query parameters.

    A preset wins over explicit dates. A custom range missing a
    bound starts on the first of the current month or ends today.
    With no parameters at all the current month is used.
    """
    try:
        if period:
            return resolve_period(period)
        if start or end:
            today = datetime.date.today()
            return custom_period(start or today.replace(day=1), end or today)
        return resolve_period("this_month")
    except LedgerError as e:
        raise HTTPException(status_code=400, detail=str(e))
