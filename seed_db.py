import logging
import os
import sys

# Add root to pythonpath
sys.path.append(os.getcwd())

from acme_dashboard.adapters.sqlite.repos import (  # noqa: E402
    SQLiteCustomerRepo,
    SQLiteInvoiceRepo,
    SQLiteUserRepo,
)
from acme_dashboard.adapters.sqlite.schema import create_schema  # noqa: E402
from acme_dashboard.adapters.sqlite_db import SQLiteDatabase  # noqa: E402
from acme_dashboard.api.auth_utils import get_password_hash  # noqa: E402
from acme_dashboard.domain.entities import Customer, Invoice, User  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

CUSTOMERS = [
    Customer(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    ),
    Customer(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    ),
    Customer(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
        image_url="/customers/lee-robinson.png",
    ),
    Customer(
        id="76d65c26-f784-44a2-ac19-586678f7c2f2",
        name="Michael Novotny",
        email="michael@novotny.com",
        image_url="/customers/michael-novotny.png",
    ),
]

INVOICES = [
    Invoice(customer_id=CUSTOMERS[0].id, amount=15795, status="pending", date="2022-12-06"),
    Invoice(customer_id=CUSTOMERS[1].id, amount=20348, status="pending", date="2022-11-14"),
    Invoice(customer_id=CUSTOMERS[3].id, amount=3040, status="paid", date="2022-10-29"),
    Invoice(customer_id=CUSTOMERS[2].id, amount=44800, status="paid", date="2023-09-10"),
    Invoice(customer_id=CUSTOMERS[0].id, amount=34577, status="pending", date="2023-08-05"),
    Invoice(customer_id=CUSTOMERS[3].id, amount=54246, status="pending", date="2023-07-16"),
    Invoice(customer_id=CUSTOMERS[1].id, amount=666, status="pending", date="2023-06-27"),
    Invoice(customer_id=CUSTOMERS[2].id, amount=32545, status="paid", date="2023-06-09"),
]


def seed() -> None:
    database_url = os.environ.get("DATABASE_URL")
    if not database_url:
        logger.error("DATABASE_URL is not set.")
        sys.exit(1)

    with SQLiteDatabase.from_url(database_url) as db:
        logger.info(f"Seeding to {db.path}")
        create_schema(db)

        user_repo = SQLiteUserRepo(db)
        for data in USERS:
            if user_repo.get_by_email(data["email"]):
                logger.info(f"User {data['email']} already exists, skipping.")
                continue
            user_repo.save(
                User(
                    id=data["id"],
                    name=data["name"],
                    email=data["email"],
                    password=get_password_hash(data["password"]),
                )
            )

        customer_repo = SQLiteCustomerRepo(db)
        for customer in CUSTOMERS:
            customer_repo.save(customer)

        invoice_repo = SQLiteInvoiceRepo(db)
        if invoice_repo.list_with_customers():
            logger.info("Invoices already present, skipping.")
        else:
            for invoice in INVOICES:
                invoice_repo.insert(invoice)

    logger.info("Seeding complete.")


if __name__ == "__main__":
    seed()
