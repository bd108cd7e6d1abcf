"""
Tests for the chart of accounts catalog.
"""

import logging

import pytest

from erp_ledger.chart import DEFAULT_CHART, default_catalog
from erp_ledger.exceptions import (
    AccountNotFoundError,
    ConfigurationWarning,
    DuplicateAccountError,
)
from erp_ledger.models.enums import AccountType, BalanceSide
from erp_ledger.schemas.ledger import Account
from erp_ledger.services.catalog import ChartOfAccounts


def make_account(account_id, account_type, normal_balance, name=None):
    return Account(
        id=account_id,
        name=name or account_id.title(),
        type=account_type,
        category="Test",
        normal_balance=normal_balance,
    )


class TestLookup:

    def test_lookup_returns_account(self):
        cash = make_account("cash", AccountType.ASSET, BalanceSide.DEBIT)
        catalog = ChartOfAccounts([cash])

        assert catalog.lookup("cash") == cash

    def test_lookup_unknown_id_raises_not_found(self):
        catalog = ChartOfAccounts([])

        with pytest.raises(AccountNotFoundError, match="not found") as exc:
            catalog.lookup("missing")
        assert exc.value.account_id == "missing"

    def test_not_found_is_a_value_error(self):
        with pytest.raises(ValueError):
            ChartOfAccounts([]).lookup("missing")

    def test_duplicate_id_rejected(self):
        with pytest.raises(DuplicateAccountError, match="already exists"):
            ChartOfAccounts([
                make_account("cash", AccountType.ASSET, BalanceSide.DEBIT),
                make_account("cash", AccountType.ASSET, BalanceSide.DEBIT),
            ])


class TestListByType:

    def test_preserves_catalog_order(self):
        catalog = ChartOfAccounts([
            make_account("bank", AccountType.ASSET, BalanceSide.DEBIT),
            make_account("loan", AccountType.LIABILITY, BalanceSide.CREDIT),
            make_account("cash", AccountType.ASSET, BalanceSide.DEBIT),
        ])

        ids = [a.id for a in catalog.list_by_type(AccountType.ASSET)]
        assert ids == ["bank", "cash"]

    def test_type_with_no_accounts_is_empty(self):
        catalog = ChartOfAccounts([
            make_account("cash", AccountType.ASSET, BalanceSide.DEBIT),
        ])
        assert catalog.list_by_type(AccountType.REVENUE) == []

    def test_iteration_and_membership(self):
        catalog = default_catalog()

        assert len(catalog) == len(DEFAULT_CHART)
        assert [a.id for a in catalog] == [a.id for a in DEFAULT_CHART]
        assert "drawings" in catalog
        assert "nope" not in catalog


class TestConventionWarnings:

    def test_conventional_chart_has_no_warnings(self):
        catalog = ChartOfAccounts([
            make_account("cash", AccountType.ASSET, BalanceSide.DEBIT),
            make_account("sales", AccountType.REVENUE, BalanceSide.CREDIT),
        ])
        assert catalog.convention_warnings() == []

    def test_contra_account_is_flagged_not_corrected(self):
        catalog = default_catalog()

        warnings = catalog.convention_warnings()
        assert [w.account_id for w in warnings] == ["drawings"]
        assert isinstance(warnings[0], ConfigurationWarning)
        assert warnings[0].expected == "CREDIT"
        assert catalog.lookup("drawings").normal_balance == BalanceSide.DEBIT

    def test_warning_is_logged_when_catalog_is_built(self, caplog):
        with caplog.at_level(logging.WARNING, logger="erp_ledger.services.catalog"):
            ChartOfAccounts([
                make_account("drawings", AccountType.EQUITY, BalanceSide.DEBIT),
            ])

        assert "drawings" in caplog.text
        assert "CREDIT" in caplog.text
