"""
Report service.

Glue between the read ports and the pure engine. Each report:
1. Reads the chart of accounts and the journal once
2. Builds a fresh catalog from that snapshot
3. Narrows the journal to the reporting period
4. Runs the engine in memory

No other state is kept between reports.
"""

import datetime
import logging
from decimal import Decimal

from erp_ledger.config import get_settings
from erp_ledger.schemas.ledger import AccountBalance, AccountLedger, Transaction
from erp_ledger.schemas.reports import (
    BalanceSheet,
    IncomeStatement,
    PeriodReport,
    ReportPeriod,
    StatementTotals,
    TrialBalance,
)
from erp_ledger.services import statement_aggregator
from erp_ledger.services.balance_resolver import account_ledger, resolve
from erp_ledger.services.catalog import ChartOfAccounts
from erp_ledger.services.period_filter import filter_by_period
from erp_ledger.services.sources import LedgerSource

logger = logging.getLogger(__name__)


class ReportService:
    """
    Produces statements for a reporting period.

    tolerance and net_contra_accounts default to the application
    settings so every report in a deployment uses the same rules.
    The balance sheet always nets contra accounts.
    """

    def __init__(
        self,
        source: LedgerSource,
        tolerance: Decimal | None = None,
        net_contra_accounts: bool | None = None,
    ):
        settings = get_settings()
        self.source = source
        self.tolerance = (
            settings.BALANCE_TOLERANCE if tolerance is None else tolerance
        )
        self.net_contra_accounts = (
            settings.NET_CONTRA_ACCOUNTS
            if net_contra_accounts is None
            else net_contra_accounts
        )

    def catalog(self) -> ChartOfAccounts:
        return ChartOfAccounts(self.source.load_accounts())

    def _snapshot(
        self, period: ReportPeriod
    ) -> tuple[ChartOfAccounts, list[Transaction]]:
        catalog = self.catalog()
        transactions = filter_by_period(
            self.source.load_transactions(), period.start, period.end
        )
        return catalog, transactions

    def statement(self, period: ReportPeriod) -> PeriodReport[StatementTotals]:
        catalog, transactions = self._snapshot(period)
        totals = statement_aggregator.aggregate(
            catalog,
            transactions,
            tolerance=self.tolerance,
            net_contra_accounts=self.net_contra_accounts,
        )
        if not totals.is_balanced:
            logger.warning(
                "Books do not balance for %s: difference %s",
                period.label,
                totals.difference,
            )
        return PeriodReport[StatementTotals](period=period, report=totals)

    def trial_balance(self, period: ReportPeriod) -> PeriodReport[TrialBalance]:
        catalog, transactions = self._snapshot(period)
        balances = statement_aggregator.resolve_catalog(catalog, transactions)
        return PeriodReport[TrialBalance](
            period=period,
            report=statement_aggregator.trial_balance(balances, self.tolerance),
        )

    def income_statement(self, period: ReportPeriod) -> PeriodReport[IncomeStatement]:
        catalog, transactions = self._snapshot(period)
        return PeriodReport[IncomeStatement](
            period=period,
            report=statement_aggregator.income_statement(
                catalog,
                transactions,
                net_contra_accounts=self.net_contra_accounts,
            ),
        )

    def balance_sheet(self, period: ReportPeriod) -> PeriodReport[BalanceSheet]:
        catalog, transactions = self._snapshot(period)
        return PeriodReport[BalanceSheet](
            period=period,
            report=statement_aggregator.balance_sheet(
                catalog, transactions, tolerance=self.tolerance
            ),
        )

    def account_balance(
        self,
        account_id: str,
        start: datetime.date | None = None,
        end: datetime.date | None = None,
    ) -> AccountBalance:
        """
        Balance for one account, over a period or the whole journal.

        Raises AccountNotFoundError if the id is not in the catalog.
        """
        account = self.catalog().lookup(account_id)
        return resolve(account, self._journal(start, end))

    def account_ledger(
        self,
        account_id: str,
        start: datetime.date | None = None,
        end: datetime.date | None = None,
    ) -> AccountLedger:
        account = self.catalog().lookup(account_id)
        return account_ledger(account, self._journal(start, end))

    def _journal(
        self, start: datetime.date | None, end: datetime.date | None
    ) -> list[Transaction]:
        transactions = self.source.load_transactions()
        if start is None and end is None:
            return transactions
        return filter_by_period(
            transactions,
            start or datetime.date.min,
            end or datetime.date.max,
        )
