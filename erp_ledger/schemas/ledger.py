"""
Pydantic records for the ledger engine.

These are the typed inputs and outputs of the computation core.
They are frozen: a record never changes after it is built, so a
report run cannot alter the snapshot it was handed.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from erp_ledger.models.enums import (
    AccountType,
    BalanceSide,
    CONVENTIONAL_NORMAL_BALANCE,
)


class Account(BaseModel):
    """One entry in the chart of accounts."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=100)
    type: AccountType
    category: str = Field(default="", max_length=100)
    normal_balance: BalanceSide
    description: str | None = None

    @property
    def is_contra(self) -> bool:
        """True when the declared normal balance opposes the type's convention."""
        return self.normal_balance != CONVENTIONAL_NORMAL_BALANCE[self.type]


class Transaction(BaseModel):
    """
    A posted double-entry journal line.

    debit_account_id == credit_account_id is invalid data, but it
    is not rejected here: the resolver treats the two legs
    independently and the aggregator logs the line.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, max_length=64)
    date: datetime.datetime | datetime.date
    description: str = Field(default="", max_length=255)
    amount: Decimal = Field(gt=0)
    debit_account_id: str = Field(min_length=1)
    credit_account_id: str = Field(min_length=1)


class AccountBalance(BaseModel):
    """
    Net balance of one account over a set of transactions.

    balance_type is the side the balance actually sits on, which
    can differ from the account's normal balance (an overdrawn
    bank account sits on the credit side).
    """

    model_config = ConfigDict(frozen=True)

    account: Account
    debit_total: Decimal
    credit_total: Decimal
    balance_amount: Decimal = Field(ge=0)
    balance_type: BalanceSide

    @computed_field
    @property
    def signed_balance(self) -> Decimal:
        """Balance in the account's own polarity: negative when abnormal."""
        if self.balance_type == self.account.normal_balance:
            return self.balance_amount
        return -self.balance_amount

    @computed_field
    @property
    def is_abnormal(self) -> bool:
        return (
            self.balance_amount != 0
            and self.balance_type != self.account.normal_balance
        )


class LedgerLine(BaseModel):
    """One posting in an account's T-account view."""

    model_config = ConfigDict(frozen=True)

    transaction_id: str
    date: datetime.datetime | datetime.date
    description: str
    side: BalanceSide
    amount: Decimal
    running_balance: Decimal


class AccountLedger(BaseModel):
    """Chronological postings for one account with a running balance."""

    model_config = ConfigDict(frozen=True)

    account: Account
    lines: list[LedgerLine]
    debit_total: Decimal
    credit_total: Decimal
    closing_balance: AccountBalance
