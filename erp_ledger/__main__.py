"""
Server entry point.

Usage:
    python -m erp_ledger
"""

import uvicorn

from erp_ledger.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "erp_ledger.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
