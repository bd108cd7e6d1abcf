"""
Read ports for the ledger engine.

The engine never fetches data itself. Callers hand it a source
that can produce the chart of accounts and the journal; the
report service reads each once per report so a single report
always reflects one snapshot.
"""

from typing import Iterable, Protocol

from erp_ledger.schemas.ledger import Account, Transaction


class CatalogSource(Protocol):
    def load_accounts(self) -> list[Account]:
        """Return the chart of accounts in catalog order."""
        ...


class JournalSource(Protocol):
    def load_transactions(self) -> list[Transaction]:
        """Return every posted journal line, in posting order."""
        ...


class LedgerSource(CatalogSource, JournalSource, Protocol):
    """A source that serves both the catalog and the journal."""


class InMemoryLedgerSource:
    """Both ports over plain lists, for tests and embedding."""

    def __init__(
        self,
        accounts: Iterable[Account] = (),
        transactions: Iterable[Transaction] = (),
    ):
        self.accounts = list(accounts)
        self.transactions = list(transactions)

    def load_accounts(self) -> list[Account]:
        return list(self.accounts)

    def load_transactions(self) -> list[Transaction]:
        return list(self.transactions)
