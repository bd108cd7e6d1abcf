"""
SQLAlchemy-backed read ports.

Maps ledger_accounts and journal_transactions rows into the
engine's frozen records. The store only reads, apart from
seed_chart(), which loads the default chart into an empty table.
"""

import logging
from typing import Iterable

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from erp_ledger.models.ledger_account import LedgerAccount
from erp_ledger.models.journal_transaction import JournalTransaction
from erp_ledger.schemas.ledger import Account, Transaction

logger = logging.getLogger(__name__)


def account_from_row(row: LedgerAccount) -> Account:
    return Account(
        id=row.id,
        name=row.name,
        type=row.account_type,
        category=row.category,
        normal_balance=row.normal_balance,
        description=row.description,
    )


def transaction_from_row(row: JournalTransaction) -> Transaction:
    return Transaction(
        id=row.id,
        date=row.posted_at,
        description=row.description,
        amount=row.amount,
        debit_account_id=row.debit_account_id,
        credit_account_id=row.credit_account_id,
    )


class LedgerStore:
    """
    Catalog and journal reads for one database session.

    The caller owns the session and therefore the transaction
    boundary, which is what keeps both reads on one snapshot.
    """

    def __init__(self, db: Session):
        self.db = db

    def load_accounts(self) -> list[Account]:
        rows = self.db.execute(
            select(LedgerAccount).order_by(LedgerAccount.position)
        ).scalars().all()
        return [account_from_row(row) for row in rows]

    def load_transactions(self) -> list[Transaction]:
        rows = self.db.execute(
            select(JournalTransaction).order_by(
                JournalTransaction.posted_at, JournalTransaction.created_at
            )
        ).scalars().all()
        return [transaction_from_row(row) for row in rows]

    def seed_chart(self, accounts: Iterable[Account]) -> int:
        """
        Insert the given chart if the accounts table is empty.

        Returns the number of accounts inserted. The caller is
        responsible for calling db.commit().
        """
        existing = self.db.execute(
            select(func.count()).select_from(LedgerAccount)
        ).scalar()
        if existing:
            logger.info("Chart of accounts already has %d accounts", existing)
            return 0

        inserted = 0
        for position, account in enumerate(accounts):
            self.db.add(LedgerAccount(
                id=account.id,
                position=position,
                name=account.name,
                account_type=account.type,
                category=account.category,
                normal_balance=account.normal_balance,
                description=account.description,
            ))
            inserted += 1
        self.db.flush()
        logger.info("Seeded %d chart of accounts entries", inserted)
        return inserted
