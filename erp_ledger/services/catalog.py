"""
Chart of accounts catalog.

A read-only registry built once per computation from whatever
snapshot the caller supplies. Catalog order is significant: it
is the order accounts appear in on every report.
"""

import logging
from typing import Iterable, Iterator

from erp_ledger.exceptions import (
    AccountNotFoundError,
    ConfigurationWarning,
    DuplicateAccountError,
)
from erp_ledger.models.enums import AccountType, CONVENTIONAL_NORMAL_BALANCE
from erp_ledger.schemas.ledger import Account

logger = logging.getLogger(__name__)


class ChartOfAccounts:
    """
    Lookup helpers over an ordered, immutable list of accounts.

    Building the catalog checks every account against the
    type-based normal balance convention. Deviations are logged
    and kept, because contra accounts are legitimate.
    """

    def __init__(self, accounts: Iterable[Account]):
        self._accounts: tuple[Account, ...] = tuple(accounts)
        self._by_id: dict[str, Account] = {}
        for account in self._accounts:
            if account.id in self._by_id:
                raise DuplicateAccountError(account.id)
            self._by_id[account.id] = account

        for warning in self.convention_warnings():
            logger.warning("%s", warning)

    def lookup(self, account_id: str) -> Account:
        """Return the account with this id, or raise AccountNotFoundError."""
        try:
            return self._by_id[account_id]
        except KeyError:
            raise AccountNotFoundError(account_id) from None

    def list_by_type(self, account_type: AccountType) -> list[Account]:
        """All accounts of the given type, in catalog order."""
        return [a for a in self._accounts if a.type == account_type]

    def convention_warnings(self) -> list[ConfigurationWarning]:
        """One warning per account whose normal balance breaks convention."""
        return [
            ConfigurationWarning(
                account_id=account.id,
                account_type=account.type.value,
                normal_balance=account.normal_balance.value,
                expected=CONVENTIONAL_NORMAL_BALANCE[account.type].value,
            )
            for account in self._accounts
            if account.is_contra
        ]

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._by_id

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __repr__(self) -> str:
        return f"<ChartOfAccounts {len(self._accounts)} accounts>"
