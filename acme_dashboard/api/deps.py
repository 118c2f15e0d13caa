import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from acme_dashboard.adapters.auth.credentials import CredentialsProvider
from acme_dashboard.adapters.clock import SystemClock
from acme_dashboard.adapters.page_cache import InMemoryPageCache
from acme_dashboard.adapters.sqlite.repos import SQLiteInvoiceRepo, SQLiteUserRepo
from acme_dashboard.adapters.sqlite_db import SQLiteDatabase
from acme_dashboard.api.auth_utils import decode_access_token
from acme_dashboard.domain.entities import User
from acme_dashboard.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.database_url = os.environ.get("DATABASE_URL", "")
        self.rules_path = Path(os.environ.get("ACME_RULES_PATH", str(self.base_dir / "rules.yaml")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Application-scoped state (created in the lifespan handler) ---
def get_rules(request: Request) -> Rules:
    rules: Rules = request.app.state.rules
    return rules


def get_database(request: Request) -> SQLiteDatabase:
    db: SQLiteDatabase = request.app.state.db
    return db


def get_page_cache(request: Request) -> InMemoryPageCache:
    cache: InMemoryPageCache = request.app.state.page_cache
    return cache


# --- Repos ---
def get_invoice_repo(db: SQLiteDatabase = Depends(get_database)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(db)


def get_user_repo(db: SQLiteDatabase = Depends(get_database)) -> SQLiteUserRepo:
    return SQLiteUserRepo(db)


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Forms ---
async def get_form_data(request: Request) -> dict[str, str]:
    """Posted form fields. File uploads are ignored."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


# --- Auth ---
def get_identity_provider(
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> CredentialsProvider:
    return CredentialsProvider(
        user_repo,
        password_min_length=rules.auth.password.min_length,
        session_ttl_minutes=rules.auth.sessions.ttl_minutes,
        time=clock,
    )


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    rules: Rules = Depends(get_rules),
) -> User:
    # 1. Try Cookie first (HttpOnly)
    cookie_token = request.cookies.get(rules.auth.sessions.cookie.name)
    if cookie_token and cookie_token.startswith("Bearer "):
        token = cookie_token.split(" ")[1]

    # 2. Header (OAuth2Bearer) is used when no cookie is present
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # 3. Decode
    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if user_id is None or not isinstance(user_id, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    # 4. Fetch User
    user = user_repo.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return user
