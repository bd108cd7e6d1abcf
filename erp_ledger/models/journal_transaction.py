"""
Journal transaction model.

Each row is one posted double-entry line: the same amount on
the debit leg of one account and the credit leg of another.
Rows are immutable. Corrections are new offsetting rows
written by the posting side of the ERP, never by this service.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from erp_ledger.models.base import Base


class JournalTransaction(Base):
    """
    A posted journal line.

    Account references are foreign keys, but the engine still
    validates them against the catalog snapshot it was given.
    """

    __tablename__ = "journal_transactions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    posted_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    debit_account_id: Mapped[str] = mapped_column(
        ForeignKey("ledger_accounts.id"), nullable=False, index=True
    )
    credit_account_id: Mapped[str] = mapped_column(
        ForeignKey("ledger_accounts.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<JournalTransaction {self.id} {self.amount} "
            f"{self.debit_account_id}->{self.credit_account_id}>"
        )
