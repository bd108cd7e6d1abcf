"""
Statement aggregator.

Turns a chart of accounts and a (period-filtered) journal into
report totals:
1. Every transaction leg must reference a catalog account
2. Each account is resolved once, in catalog order
3. Each account adds to its group on its declared normal side
4. Assets = Liabilities + Equity + Net Profit is checked, not assumed

An unbalanced ledger is a business fact and never raises. The
only hard failure is a dangling account reference, which aborts
the whole computation.
"""

import logging
from decimal import Decimal
from typing import Iterable

from erp_ledger.exceptions import AccountReferenceError
from erp_ledger.models.enums import STATEMENT_ORDER, AccountType, BalanceSide
from erp_ledger.schemas.ledger import AccountBalance, Transaction
from erp_ledger.schemas.reports import (
    BalanceSheet,
    IncomeStatement,
    StatementLine,
    StatementSection,
    StatementTotals,
    TrialBalance,
)
from erp_ledger.services.balance_resolver import ZERO, resolve
from erp_ledger.services.catalog import ChartOfAccounts

logger = logging.getLogger(__name__)

# Rounding tolerance for the balanced-books checks.
EPSILON = Decimal("0.01")

# Expense accounts in this category are reported as cost of sales.
COST_OF_SALES_CATEGORY = "Direct Expense"


def validate_references(
    catalog: ChartOfAccounts, transactions: Iterable[Transaction]
) -> None:
    """
    Raise AccountReferenceError for the first dangling account id.

    Lines are checked in journal order, debit leg before credit
    leg. Self-referencing lines are logged but allowed through.
    """
    for transaction in transactions:
        for leg, account_id in (
            ("debit", transaction.debit_account_id),
            ("credit", transaction.credit_account_id),
        ):
            if account_id not in catalog:
                raise AccountReferenceError(transaction.id, account_id, leg)
        if transaction.debit_account_id == transaction.credit_account_id:
            logger.warning(
                "Transaction %s debits and credits the same account %s; "
                "its legs net to zero",
                transaction.id,
                transaction.debit_account_id,
            )


def resolve_catalog(
    catalog: ChartOfAccounts, transactions: Iterable[Transaction]
) -> list[AccountBalance]:
    """Validate references, then resolve every account in catalog order."""
    transactions = list(transactions)
    validate_references(catalog, transactions)
    return [resolve(account, transactions) for account in catalog]


def contribution(balance: AccountBalance, net_contra_accounts: bool = False) -> Decimal:
    """
    Signed amount an account adds to its type group.

    Positive when the balance sits on the account's declared
    normal side. With net_contra_accounts, a contra account
    (e.g. Drawings under Equity) reduces its group instead.
    """
    amount = balance.signed_balance
    if net_contra_accounts and balance.account.is_contra:
        return -amount
    return amount


def group_totals(
    balances: Iterable[AccountBalance], net_contra_accounts: bool = False
) -> dict[AccountType, Decimal]:
    totals = {account_type: ZERO for account_type in STATEMENT_ORDER}
    for balance in balances:
        totals[balance.account.type] += contribution(balance, net_contra_accounts)
    return totals


def trial_balance(
    balances: Iterable[AccountBalance], tolerance: Decimal = EPSILON
) -> TrialBalance:
    """Debit and credit columns over the accounts with a nonzero balance."""
    rows = [b for b in balances if b.balance_amount != 0]
    total_debits = sum(
        (b.balance_amount for b in rows if b.balance_type == BalanceSide.DEBIT),
        ZERO,
    )
    total_credits = sum(
        (b.balance_amount for b in rows if b.balance_type == BalanceSide.CREDIT),
        ZERO,
    )
    difference = total_debits - total_credits
    return TrialBalance(
        rows=rows,
        total_debits=total_debits,
        total_credits=total_credits,
        difference=difference,
        is_balanced=abs(difference) < tolerance,
    )


def aggregate(
    catalog: ChartOfAccounts,
    transactions: Iterable[Transaction],
    *,
    tolerance: Decimal = EPSILON,
    net_contra_accounts: bool = False,
) -> StatementTotals:
    """
    Compute statement totals for one catalog and journal snapshot.

    Deterministic: the same snapshot always yields equal totals.
    An empty catalog yields zeros and is trivially balanced.
    """
    transactions = list(transactions)
    balances = resolve_catalog(catalog, transactions)
    totals = group_totals(balances, net_contra_accounts)

    revenue = totals[AccountType.REVENUE]
    expenses = totals[AccountType.EXPENSE]
    net_profit = revenue - expenses
    assets = totals[AccountType.ASSET]
    liabilities = totals[AccountType.LIABILITY]
    equity = totals[AccountType.EQUITY]

    difference = assets - (liabilities + equity + net_profit)

    return StatementTotals(
        revenue=revenue,
        expenses=expenses,
        net_profit=net_profit,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        difference=difference,
        is_balanced=abs(difference) < tolerance,
        account_balances=[b for b in balances if b.balance_amount != 0],
        trial_balance=trial_balance(balances, tolerance),
        transaction_count=len(transactions),
    )


def _section(
    balances: Iterable[AccountBalance], net_contra_accounts: bool
) -> StatementSection:
    lines = [
        StatementLine(
            account_id=b.account.id,
            name=b.account.name,
            category=b.account.category,
            amount=contribution(b, net_contra_accounts),
            is_contra=b.account.is_contra,
        )
        for b in balances
        if b.balance_amount != 0
    ]
    return StatementSection(
        lines=lines,
        total=sum((line.amount for line in lines), ZERO),
    )


def _of_type(balances: list[AccountBalance], account_type: AccountType) -> list[AccountBalance]:
    return [b for b in balances if b.account.type == account_type]


def income_statement(
    catalog: ChartOfAccounts,
    transactions: Iterable[Transaction],
    *,
    net_contra_accounts: bool = False,
) -> IncomeStatement:
    """
    Revenue less cost of sales gives gross profit; less operating
    expenses gives net profit, which matches aggregate().net_profit.
    """
    balances = resolve_catalog(catalog, transactions)
    expenses = _of_type(balances, AccountType.EXPENSE)

    revenue = _section(_of_type(balances, AccountType.REVENUE), net_contra_accounts)
    cost_of_sales = _section(
        [b for b in expenses if b.account.category == COST_OF_SALES_CATEGORY],
        net_contra_accounts,
    )
    operating = _section(
        [b for b in expenses if b.account.category != COST_OF_SALES_CATEGORY],
        net_contra_accounts,
    )
    gross_profit = revenue.total - cost_of_sales.total

    return IncomeStatement(
        revenue=revenue,
        cost_of_sales=cost_of_sales,
        gross_profit=gross_profit,
        operating_expenses=operating,
        net_profit=gross_profit - operating.total,
    )


def balance_sheet(
    catalog: ChartOfAccounts,
    transactions: Iterable[Transaction],
    *,
    tolerance: Decimal = EPSILON,
    net_contra_accounts: bool = True,
) -> BalanceSheet:
    """
    Assets against liabilities plus equity, with net profit carried into equity.

    Unlike aggregate(), contra accounts are netted by default so that
    equity reads as capital less drawings.
    """
    balances = resolve_catalog(catalog, transactions)
    totals = group_totals(balances, net_contra_accounts)
    net_profit = totals[AccountType.REVENUE] - totals[AccountType.EXPENSE]

    assets = _section(_of_type(balances, AccountType.ASSET), net_contra_accounts)
    liabilities = _section(_of_type(balances, AccountType.LIABILITY), net_contra_accounts)
    equity = _section(_of_type(balances, AccountType.EQUITY), net_contra_accounts)

    total_equity = equity.total + net_profit
    total_liabilities_and_equity = liabilities.total + total_equity
    difference = assets.total - total_liabilities_and_equity

    return BalanceSheet(
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        net_profit=net_profit,
        total_equity=total_equity,
        total_liabilities_and_equity=total_liabilities_and_equity,
        difference=difference,
        is_balanced=abs(difference) < tolerance,
    )
