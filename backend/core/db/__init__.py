"""
Database package for the Bakehouse backend.

    from backend.core.db import get_db, create_transaction
"""

# Base - connection, initialization
from .base import (
    DB_PATH,
    get_db,
    init_db,
)

# Transactions
from .transactions import (
    create_transaction,
    get_transaction,
    list_transactions,
)

__all__ = [
    "DB_PATH",
    "get_db",
    "init_db",
    "create_transaction",
    "get_transaction",
    "list_transactions",
]
