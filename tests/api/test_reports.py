"""
Tests for report API endpoints.
"""

from datetime import date

import pytest

from erp_ledger.chart import DEFAULT_CHART
from erp_ledger.services.ledger_store import LedgerStore
from erp_ledger.services.periods import resolve_period


MARCH = {"start": "2026-03-01", "end": "2026-03-31"}


@pytest.fixture
def seeded(db_session, post_line):
    LedgerStore(db_session).seed_chart(DEFAULT_CHART)
    post_line("capital", date(2026, 3, 1), "5000", "bank", "owners-capital")
    post_line("sale", date(2026, 3, 3), "1000", "cash", "sales-revenue")
    post_line("cogs", date(2026, 3, 3), "400", "cost-of-goods-sold", "inventory")
    post_line("stock", date(2026, 3, 2), "400", "inventory", "accounts-payable")
    post_line("rent", date(2026, 3, 31), "300", "rent-expense", "cash")
    post_line("draw", date(2026, 3, 20), "200", "drawings", "bank")
    post_line("april", date(2026, 4, 1), "999", "cash", "service-revenue")
    db_session.commit()


class TestStatement:

    def test_statement_totals(self, client, seeded):
        response = client.get("/reports/statement", params=MARCH)

        assert response.status_code == 200
        body = response.json()
        assert body["period"]["start"] == "2026-03-01"
        assert body["period"]["end"] == "2026-03-31"

        totals = body["report"]
        assert float(totals["revenue"]) == 1000.0
        assert float(totals["expenses"]) == 700.0
        assert float(totals["net_profit"]) == 300.0
        # bank 4800 + cash 700 + inventory 0
        assert float(totals["assets"]) == 5500.0
        assert float(totals["liabilities"]) == 400.0
        # capital 5000 plus drawings 200 on its declared debit side
        assert float(totals["equity"]) == 5200.0
        assert float(totals["difference"]) == -400.0
        assert totals["is_balanced"] is False
        assert totals["transaction_count"] == 6

    def test_preset_period(self, client, seeded):
        expected = resolve_period("last_year")

        response = client.get("/reports/statement", params={"period": "last_year"})

        assert response.status_code == 200
        period = response.json()["period"]
        assert period["start"] == expected.start.isoformat()
        assert period["end"] == expected.end.isoformat()
        assert period["label"] == expected.label

    def test_default_period_is_this_month(self, client, seeded):
        expected = resolve_period("this_month")

        period = client.get("/reports/statement").json()["period"]

        assert period["start"] == expected.start.isoformat()
        assert period["end"] == expected.end.isoformat()

    def test_unknown_preset_returns_400(self, client, seeded):
        response = client.get("/reports/statement", params={"period": "fortnight"})
        assert response.status_code == 400

    def test_dangling_reference_returns_422(self, client, seeded, post_line, db_session):
        post_line("ghost-line", date(2026, 3, 10), "10", "cash", "ghost")
        db_session.commit()

        response = client.get("/reports/statement", params=MARCH)

        assert response.status_code == 422
        assert "ghost-line" in response.json()["detail"]


class TestStatementViews:

    def test_trial_balance(self, client, seeded):
        response = client.get("/reports/trial-balance", params=MARCH)

        assert response.status_code == 200
        tb = response.json()["report"]
        assert float(tb["total_debits"]) == float(tb["total_credits"])
        assert tb["is_balanced"] is True
        assert [row["account"]["id"] for row in tb["rows"]][:2] == ["cash", "bank"]

    def test_income_statement(self, client, seeded):
        report = client.get("/reports/income-statement", params=MARCH).json()["report"]

        assert float(report["gross_profit"]) == 600.0
        assert float(report["operating_expenses"]["total"]) == 300.0
        assert float(report["net_profit"]) == 300.0

    def test_balance_sheet(self, client, seeded):
        report = client.get("/reports/balance-sheet", params=MARCH).json()["report"]

        assert float(report["assets"]["total"]) == 5500.0
        assert float(report["total_liabilities_and_equity"]) == 5500.0
        assert report["is_balanced"] is True
