"""
Tests for the period filter.
"""

from datetime import date, datetime
from decimal import Decimal

from erp_ledger.schemas.ledger import Transaction
from erp_ledger.services.period_filter import filter_by_period, to_day


def txn(txn_id, day):
    return Transaction(
        id=txn_id,
        date=day,
        amount=Decimal("1.00"),
        debit_account_id="cash",
        credit_account_id="sales-revenue",
    )


def ids(transactions):
    return [t.id for t in transactions]


def test_end_day_included_at_any_time_of_day():
    journal = [
        txn("midnight", datetime(2026, 3, 31, 0, 0)),
        txn("late", datetime(2026, 3, 31, 23, 59, 59, 999999)),
    ]

    result = filter_by_period(journal, date(2026, 3, 1), date(2026, 3, 31))

    assert ids(result) == ["midnight", "late"]


def test_day_after_end_excluded():
    journal = [txn("next", date(2026, 4, 1))]

    assert filter_by_period(journal, date(2026, 3, 1), date(2026, 3, 31)) == []


def test_start_day_included_and_day_before_excluded():
    journal = [
        txn("before", datetime(2026, 2, 28, 23, 59)),
        txn("first", datetime(2026, 3, 1, 0, 0)),
    ]

    result = filter_by_period(journal, date(2026, 3, 1), date(2026, 3, 31))

    assert ids(result) == ["first"]


def test_bounds_with_time_of_day_are_truncated():
    journal = [txn("morning", datetime(2026, 3, 10, 8, 0))]

    # An end instant earlier in the day than the transaction still includes it
    result = filter_by_period(
        journal, datetime(2026, 3, 10, 12, 0), datetime(2026, 3, 10, 6, 0)
    )

    assert ids(result) == ["morning"]


def test_inverted_range_is_empty_not_an_error():
    journal = [txn("t1", date(2026, 3, 10))]

    assert filter_by_period(journal, date(2026, 3, 31), date(2026, 3, 1)) == []


def test_preserves_input_order_and_does_not_mutate():
    journal = [
        txn("c", date(2026, 3, 20)),
        txn("a", date(2026, 3, 2)),
        txn("b", date(2026, 3, 11)),
    ]
    snapshot = list(journal)

    result = filter_by_period(journal, date(2026, 3, 1), date(2026, 3, 31))

    assert ids(result) == ["c", "a", "b"]
    assert result is not journal
    assert journal == snapshot


def test_to_day():
    assert to_day(datetime(2026, 3, 1, 13, 45)) == date(2026, 3, 1)
    assert to_day(date(2026, 3, 1)) == date(2026, 3, 1)
