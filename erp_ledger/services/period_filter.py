"""
Period filter.

Report periods are calendar days, not instants. Both ends of a
range and every transaction date are truncated to the day before
comparing, so anything posted during the end day is included.
"""

import datetime
from typing import Iterable

from erp_ledger.schemas.ledger import Transaction


def to_day(value: datetime.date) -> datetime.date:
    """Truncate a date or datetime to its calendar day."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def filter_by_period(
    transactions: Iterable[Transaction],
    start: datetime.date,
    end: datetime.date,
) -> list[Transaction]:
    """
    Return the transactions dated within [start, end], inclusive.

    An inverted range yields an empty list rather than an error;
    range validation belongs to whoever built the period. Input
    order is preserved and the input is not modified.
    """
    start_day = to_day(start)
    end_day = to_day(end)
    if start_day > end_day:
        return []

    return [
        t for t in transactions
        if start_day <= to_day(t.date) <= end_day
    ]
