from pathlib import Path

import pytest

from acme_dashboard.adapters.sqlite.repos import SQLiteCustomerRepo
from acme_dashboard.adapters.sqlite.schema import create_schema
from acme_dashboard.adapters.sqlite_db import SQLiteDatabase
from acme_dashboard.domain.entities import Customer

PROJECT_ROOT = Path(__file__).parent.parent
CUSTOMER_ID = "c1"


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def db(tmp_path):
    """
    SQLite database under tmp_path with the schema applied and one customer.
    """
    database = SQLiteDatabase(str(tmp_path / "acme.db"))
    database.open()
    create_schema(database)
    SQLiteCustomerRepo(database).save(
        Customer(id=CUSTOMER_ID, name="Evil Rabbit", email="evil@rabbit.com")
    )
    yield database
    database.close()
