"""
Ledger account model (chart of accounts).

Rows are maintained by the admin side of the ERP. The ledger
engine only reads them, once per report.
"""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from erp_ledger.models.base import Base
from erp_ledger.models.enums import AccountType, BalanceSide


class LedgerAccount(Base):
    """
    A single account in the chart of accounts.

    position keeps the catalog order, which is also the order
    accounts appear in on every report.
    """

    __tablename__ = "ledger_accounts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum"),
        nullable=False,
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    normal_balance: Mapped[BalanceSide] = mapped_column(
        SAEnum(BalanceSide, name="balance_side_enum"),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<LedgerAccount {self.id} ({self.account_type.value})>"
