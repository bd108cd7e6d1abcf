"""
Ledger engine errors.

Every hard failure is a LedgerError, which is a ValueError so
callers that only know about ValueError still catch it. The API
layer maps the concrete subclasses to HTTP status codes.

ConfigurationWarning is not an error. It flags a chart of accounts
entry whose declared normal balance disagrees with its type's
convention, which is legitimate for contra accounts.
"""


class LedgerError(ValueError):
    """Base class for ledger engine failures."""


class AccountNotFoundError(LedgerError):
    """No account with the requested id exists in the catalog."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account '{account_id}' not found")


class DuplicateAccountError(LedgerError):
    """Two catalog entries share the same id."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account with id '{account_id}' already exists")


class AccountReferenceError(LedgerError):
    """
    A transaction leg points at an account missing from the catalog.

    Aborts the whole computation. Skipping the line would produce
    a report that looks balanced but silently omits activity.
    """

    def __init__(self, transaction_id: str, account_id: str, leg: str):
        self.transaction_id = transaction_id
        self.account_id = account_id
        self.leg = leg
        super().__init__(
            f"Transaction '{transaction_id}' references unknown "
            f"{leg} account '{account_id}'"
        )


class UnknownPeriodError(LedgerError):
    """A named reporting period preset is not recognised."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown reporting period '{name}'")


class ConfigurationWarning(UserWarning):
    """An account's normal balance deviates from its type's convention."""

    def __init__(self, account_id: str, account_type: str, normal_balance: str, expected: str):
        self.account_id = account_id
        self.account_type = account_type
        self.normal_balance = normal_balance
        self.expected = expected
        super().__init__(
            f"Account '{account_id}' ({account_type}) declares a "
            f"{normal_balance} normal balance; convention is {expected}"
        )
