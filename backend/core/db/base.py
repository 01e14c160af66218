"""
Database base module - connection management and initialization.
"""
import sqlite3
from pathlib import Path
from contextlib import contextmanager

from ..config import settings

# Database location (relative paths resolve against the project root)
DB_PATH = Path(settings.DB_PATH)
if not DB_PATH.is_absolute():
    DB_PATH = Path(__file__).resolve().parents[3] / DB_PATH


@contextmanager
def get_db():
    """Context manager for database connections."""
    conn = sqlite3.connect(str(DB_PATH))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


SCHEMA = """
    -- Transactions table: payment-gateway webhook events, one row per transfer
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        sepay_id TEXT NOT NULL,
        gateway TEXT,
        transaction_date TEXT,
        account_number TEXT,
        code TEXT,
        content TEXT,
        transfer_type TEXT DEFAULT 'in',
        transfer_amount TEXT DEFAULT '0',
        accumulated TEXT DEFAULT '0',
        sub_account TEXT,
        reference_code TEXT,
        description TEXT,
        order_number TEXT,
        received_at TEXT,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    );

    CREATE INDEX IF NOT EXISTS idx_transactions_order ON transactions(order_number);
    CREATE INDEX IF NOT EXISTS idx_transactions_created ON transactions(created_at);
"""


def init_db():
    """Initialize database tables."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)

    with get_db() as conn:
        # WAL allows concurrent reads while the webhook writes
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=5000")
        conn.executescript(SCHEMA)
