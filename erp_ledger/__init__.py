"""ERP accounting ledger engine."""
