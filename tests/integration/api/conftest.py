import pytest
from fastapi.testclient import TestClient

from acme_dashboard.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteUserRepo
from acme_dashboard.api.auth_utils import get_password_hash
from acme_dashboard.api.deps import get_settings
from acme_dashboard.api.main import app
from acme_dashboard.domain.entities import Customer, User

USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
def api_env(tmp_path, monkeypatch, rules_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("ACME_RULES_PATH", str(rules_path))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(api_env):
    """TestClient with the lifespan running, one user and one customer."""
    with TestClient(app) as test_client:
        db = app.state.db
        SQLiteUserRepo(db).save(
            User(
                id="u1",
                name="User",
                email=USER_EMAIL,
                password=get_password_hash(USER_PASSWORD),
            )
        )
        SQLiteCustomerRepo(db).save(Customer(id="c1", name="Evil Rabbit", email="evil@rabbit.com"))
        yield test_client


@pytest.fixture
def auth_client(client):
    response = client.post(
        "/api/auth/login",
        data={"email": USER_EMAIL, "password": USER_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client
