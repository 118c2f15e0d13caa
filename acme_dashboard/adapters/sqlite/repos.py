from typing import Any

from acme_dashboard.adapters.sqlite_db import SQLiteDatabase
from acme_dashboard.domain.entities import Customer, Invoice, InvoiceRow, InvoiceStatus, User


class SQLiteInvoiceRepo:
    def __init__(self, db: SQLiteDatabase):
        self.db = db

    def insert(self, invoice: Invoice) -> Invoice:
        with self.db.connection() as conn:
            conn.execute(
                """
                INSERT INTO invoices (id, customer_id, amount, status, date)
                VALUES (?, ?, ?, ?, ?)
                """,
                (invoice.id, invoice.customer_id, invoice.amount, invoice.status, invoice.date),
            )
        return invoice

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: InvoiceStatus
    ) -> None:
        with self.db.connection() as conn:
            conn.execute(
                """
                UPDATE invoices
                SET customer_id = ?, amount = ?, status = ?
                WHERE id = ?
                """,
                (customer_id, amount, status, invoice_id),
            )

    def delete(self, invoice_id: str) -> None:
        with self.db.connection() as conn:
            conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        with self.db.connection() as conn:
            row = conn.execute(
                "SELECT id, customer_id, amount, status, date FROM invoices WHERE id = ?",
                (invoice_id,),
            ).fetchone()
        return Invoice(**row) if row else None

    def list_with_customers(self) -> list[InvoiceRow]:
        with self.db.connection() as conn:
            rows = conn.execute(
                """
                SELECT
                    invoices.id,
                    invoices.customer_id,
                    customers.name,
                    customers.email,
                    customers.image_url,
                    invoices.amount,
                    invoices.status,
                    invoices.date
                FROM invoices
                JOIN customers ON invoices.customer_id = customers.id
                ORDER BY invoices.date DESC, invoices.id
                """
            ).fetchall()
        return [InvoiceRow(**row) for row in rows]


class SQLiteCustomerRepo:
    def __init__(self, db: SQLiteDatabase):
        self.db = db

    def save(self, customer: Customer) -> Customer:
        with self.db.connection() as conn:
            conn.execute(
                """
                INSERT INTO customers (id, name, email, image_url)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    email=excluded.email,
                    image_url=excluded.image_url
                """,
                (customer.id, customer.name, customer.email, customer.image_url),
            )
        return customer


class SQLiteUserRepo:
    def __init__(self, db: SQLiteDatabase):
        self.db = db

    def _map_row(self, row: dict[str, Any]) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"], password=row["password"])

    def get_by_email(self, email: str) -> User | None:
        with self.db.connection() as conn:
            row = conn.execute(
                "SELECT id, name, email, password FROM users WHERE email = ?", (email,)
            ).fetchone()
        return self._map_row(row) if row else None

    def get_by_id(self, user_id: str) -> User | None:
        with self.db.connection() as conn:
            row = conn.execute(
                "SELECT id, name, email, password FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return self._map_row(row) if row else None

    def save(self, user: User) -> User:
        with self.db.connection() as conn:
            conn.execute(
                """
                INSERT INTO users (id, name, email, password)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    email=excluded.email,
                    password=excluded.password
                """,
                (user.id, user.name, user.email, user.password),
            )
        return user
