"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from erp_ledger.models.base import Base
from erp_ledger.models.enums import AccountType, BalanceSide
from erp_ledger.models.ledger_account import LedgerAccount
from erp_ledger.models.journal_transaction import JournalTransaction

__all__ = [
    "Base",
    "AccountType",
    "BalanceSide",
    "LedgerAccount",
    "JournalTransaction",
]
