"""Ledger computation and report services."""

from erp_ledger.services.catalog import ChartOfAccounts
from erp_ledger.services.balance_resolver import resolve, account_ledger
from erp_ledger.services.period_filter import filter_by_period
from erp_ledger.services.statement_aggregator import aggregate
from erp_ledger.services.report_service import ReportService

__all__ = [
    "ChartOfAccounts",
    "resolve",
    "account_ledger",
    "filter_by_period",
    "aggregate",
    "ReportService",
]
