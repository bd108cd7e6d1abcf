"""
Pydantic records for statement output.

StatementTotals is the aggregator's contract. The remaining
records are the statement views built on the same balances.
"""

import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from erp_ledger.schemas.ledger import AccountBalance


class TrialBalance(BaseModel):
    """Nonzero account balances with debit and credit column totals."""

    model_config = ConfigDict(frozen=True)

    rows: list[AccountBalance]
    total_debits: Decimal
    total_credits: Decimal
    difference: Decimal
    is_balanced: bool


class StatementTotals(BaseModel):
    """
    Report-level totals for one set of transactions.

    Group totals are in each type's natural polarity: positive
    when the group sits on its normal side.
    """

    model_config = ConfigDict(frozen=True)

    revenue: Decimal
    expenses: Decimal
    net_profit: Decimal
    assets: Decimal
    liabilities: Decimal
    equity: Decimal
    # assets - (liabilities + equity + net_profit)
    difference: Decimal
    is_balanced: bool
    account_balances: list[AccountBalance]
    trial_balance: TrialBalance
    transaction_count: int


class StatementLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str
    name: str
    category: str
    amount: Decimal
    is_contra: bool = False


class StatementSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: list[StatementLine]
    total: Decimal


class IncomeStatement(BaseModel):
    model_config = ConfigDict(frozen=True)

    revenue: StatementSection
    cost_of_sales: StatementSection
    gross_profit: Decimal
    operating_expenses: StatementSection
    net_profit: Decimal


class BalanceSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    assets: StatementSection
    liabilities: StatementSection
    equity: StatementSection
    net_profit: Decimal
    total_equity: Decimal
    total_liabilities_and_equity: Decimal
    difference: Decimal
    is_balanced: bool


class ReportPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date
    label: str


ReportT = TypeVar("ReportT")


class PeriodReport(BaseModel, Generic[ReportT]):
    """A report body together with the period it covers."""

    period: ReportPeriod
    report: ReportT
