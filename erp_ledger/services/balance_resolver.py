"""
Balance resolver.

The single place where an account's balance is derived from
journal lines. Every report goes through resolve(), so the
debit/credit side logic is never duplicated.

Balance is never stored. It is always recomputed from the
transactions passed in, which are usually already narrowed to
a reporting period.
"""

from decimal import Decimal
from typing import Iterable

from erp_ledger.models.enums import BalanceSide
from erp_ledger.schemas.ledger import (
    Account,
    AccountBalance,
    AccountLedger,
    LedgerLine,
    Transaction,
)
from erp_ledger.services.period_filter import to_day

ZERO = Decimal("0")


def resolve(account: Account, transactions: Iterable[Transaction]) -> AccountBalance:
    """
    Net an account's debits against its credits.

    The result reports the side the balance actually sits on,
    not the account's declared normal balance: a net-credit asset
    comes back as CREDIT.

    Each leg is checked on its own. A line that debits and
    credits the same account adds to both totals and nets to
    zero; it is not rejected here.
    """
    debit_total = ZERO
    credit_total = ZERO

    for transaction in transactions:
        if transaction.debit_account_id == account.id:
            debit_total += transaction.amount
        if transaction.credit_account_id == account.id:
            credit_total += transaction.amount

    net = debit_total - credit_total
    if net >= 0:
        balance_amount, balance_type = net, BalanceSide.DEBIT
    else:
        balance_amount, balance_type = -net, BalanceSide.CREDIT

    return AccountBalance(
        account=account,
        debit_total=debit_total,
        credit_total=credit_total,
        balance_amount=balance_amount,
        balance_type=balance_type,
    )


def account_ledger(account: Account, transactions: Iterable[Transaction]) -> AccountLedger:
    """
    Build the T-account view for one account.

    Lines touching the account are ordered by calendar day
    (stable for equal days). The running balance is kept in the
    account's normal polarity: debits raise a debit-normal
    account, credits raise a credit-normal one.
    """
    touching = [
        t for t in transactions
        if account.id in (t.debit_account_id, t.credit_account_id)
    ]
    touching.sort(key=lambda t: to_day(t.date))

    running = ZERO
    lines = []
    for transaction in touching:
        for side, account_id in (
            (BalanceSide.DEBIT, transaction.debit_account_id),
            (BalanceSide.CREDIT, transaction.credit_account_id),
        ):
            if account_id != account.id:
                continue
            if side == account.normal_balance:
                running += transaction.amount
            else:
                running -= transaction.amount
            lines.append(LedgerLine(
                transaction_id=transaction.id,
                date=transaction.date,
                description=transaction.description,
                side=side,
                amount=transaction.amount,
                running_balance=running,
            ))

    closing = resolve(account, touching)
    return AccountLedger(
        account=account,
        lines=lines,
        debit_total=closing.debit_total,
        credit_total=closing.credit_total,
        closing_balance=closing,
    )
