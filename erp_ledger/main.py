"""
ERP Ledger Engine: FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from erp_ledger.config import get_settings
from erp_ledger.logging_config import configure_logging
from erp_ledger.api.health import router as health_router
from erp_ledger.api.ledger import router as ledger_router
from erp_ledger.api.reports import router as reports_router

settings = get_settings()
logger = logging.getLogger(__name__)


def seed_default_chart() -> int:
    """Load the default chart of accounts into an empty database."""
    from erp_ledger.chart import DEFAULT_CHART
    from erp_ledger.models.base import SessionLocal
    from erp_ledger.services.ledger_store import LedgerStore

    db = SessionLocal()
    try:
        inserted = LedgerStore(db).seed_chart(DEFAULT_CHART)
        db.commit()
        return inserted
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(
        "Starting %s %s (%s)",
        settings.APP_NAME,
        settings.APP_VERSION,
        settings.ENVIRONMENT,
    )
    if settings.SEED_DEFAULT_CHART:
        seed_default_chart()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Account balances, trial balance and financial statements",
    lifespan=lifespan,
)

# Register routers
app.include_router(health_router)
app.include_router(ledger_router)
app.include_router(reports_router)
