"""
Named reporting periods.

Resolves presets like "this_month" into concrete (start, end)
calendar days before anything reaches the period filter. Weeks
start on Sunday. "This" periods cover the whole week, month or
year, including days that have not happened yet.
"""

import datetime
import re

from dateutil.relativedelta import relativedelta

from erp_ledger.exceptions import LedgerError, UnknownPeriodError
from erp_ledger.schemas.reports import ReportPeriod

PRESETS = (
    "this_week",
    "this_month",
    "this_year",
    "last_week",
    "last_month",
    "last_year",
)

# Quick-select ranges offered next to the presets, in months.
QUICK_RANGES = (3, 6, 12, 24, 36, 60)

_LAST_N_MONTHS = re.compile(r"^last_(\d+)_months$")


def _week_start(day: datetime.date) -> datetime.date:
    # date.weekday() counts from Monday; shift so Sunday is 0.
    return day - datetime.timedelta(days=(day.weekday() + 1) % 7)


def period_label(start: datetime.date, end: datetime.date) -> str:
    """Human-readable range, e.g. 'March 1, 2026 - March 31, 2026'."""
    def fmt(day: datetime.date) -> str:
        return f"{day:%B} {day.day}, {day.year}"
    return f"{fmt(start)} - {fmt(end)}"


def custom_period(start: datetime.date, end: datetime.date) -> ReportPeriod:
    return ReportPeriod(start=start, end=end, label=period_label(start, end))


def last_n_months(months: int, today: datetime.date | None = None) -> ReportPeriod:
    """The range from `months` months before today up to today."""
    if months <= 0:
        raise LedgerError(f"months must be positive, got {months}")
    today = today or datetime.date.today()
    return custom_period(today - relativedelta(months=months), today)


def resolve_period(name: str, today: datetime.date | None = None) -> ReportPeriod:
    """
    Resolve a preset name into a ReportPeriod.

    Accepts the names in PRESETS plus "last_<n>_months".
    Raises UnknownPeriodError for anything else.
    """
    today = today or datetime.date.today()

    match = _LAST_N_MONTHS.match(name)
    if match:
        return last_n_months(int(match.group(1)), today)

    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    if name == "this_week":
        start = _week_start(today)
        end = start + datetime.timedelta(days=6)
    elif name == "last_week":
        start = _week_start(today) - datetime.timedelta(days=7)
        end = start + datetime.timedelta(days=6)
    elif name == "this_month":
        start = month_start
        end = month_start + relativedelta(months=1, days=-1)
    elif name == "last_month":
        start = month_start - relativedelta(months=1)
        end = month_start - datetime.timedelta(days=1)
    elif name == "this_year":
        start = year_start
        end = today.replace(month=12, day=31)
    elif name == "last_year":
        start = year_start - relativedelta(years=1)
        end = year_start - datetime.timedelta(days=1)
    else:
        raise UnknownPeriodError(name)

    return custom_period(start, end)
