"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before each test and dropped after,
so no data leaks between tests.
"""

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from erp_ledger.main import app
from erp_ledger.models.base import Base, get_db
from erp_ledger.models.journal_transaction import JournalTransaction


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    get_db is overridden so the app reads the same session the
    test wrote its fixtures into.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def post_line(db_session):
    """
    Insert a journal line directly, the way the posting side would.

    Returns a function taking (id, posted_at, amount, debit, credit).
    """
    def _post(txn_id, posted_at, amount, debit, credit, description=""):
        if not isinstance(posted_at, datetime):
            posted_at = datetime(posted_at.year, posted_at.month, posted_at.day)
        row = JournalTransaction(
            id=txn_id,
            posted_at=posted_at,
            description=description,
            amount=Decimal(amount),
            debit_account_id=debit,
            credit_account_id=credit,
        )
        db_session.add(row)
        db_session.flush()
        return row

    return _post
