"""
Shared enumerations for the ledger.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid account_type
or normal_balance is caught at the database level, not just
in Python validation.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class BalanceSide(str, enum.Enum):
    """Side of the ledger a posting or balance sits on."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


# The side each account type conventionally increases on.
# Contra accounts may declare the opposite side.
CONVENTIONAL_NORMAL_BALANCE: dict[AccountType, BalanceSide] = {
    AccountType.ASSET: BalanceSide.DEBIT,
    AccountType.EXPENSE: BalanceSide.DEBIT,
    AccountType.LIABILITY: BalanceSide.CREDIT,
    AccountType.EQUITY: BalanceSide.CREDIT,
    AccountType.REVENUE: BalanceSide.CREDIT,
}

# Report order for type groups.
STATEMENT_ORDER: tuple[AccountType, ...] = (
    AccountType.ASSET,
    AccountType.LIABILITY,
    AccountType.EQUITY,
    AccountType.REVENUE,
    AccountType.EXPENSE,
)
