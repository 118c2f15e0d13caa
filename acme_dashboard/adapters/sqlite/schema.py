from acme_dashboard.adapters.sqlite_db import SQLiteDatabase

# Tables are created if missing; existing tables are never altered.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS customers (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    image_url TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS invoices (
    id TEXT PRIMARY KEY,
    customer_id TEXT NOT NULL,
    amount INTEGER NOT NULL CHECK (amount > 0),
    status TEXT NOT NULL CHECK (status IN ('paid', 'pending')),
    date TEXT NOT NULL,
    FOREIGN KEY(customer_id) REFERENCES customers(id)
);
"""


def create_schema(db: SQLiteDatabase) -> None:
    with db.connection() as conn:
        conn.executescript(SCHEMA_SQL)
