"""Pydantic records for the ledger engine and its reports."""
