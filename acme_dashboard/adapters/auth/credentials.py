"""Email/password identity provider.

Implements IdentityProviderPort for the auth component. Users live in the
``users`` table with argon2 password hashes; a successful sign-in issues a
signed session token.
"""

import logging
import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Protocol

from acme_dashboard.adapters.clock import SystemClock
from acme_dashboard.api.auth_utils import create_access_token, verify_password
from acme_dashboard.components.auth import (
    CREDENTIALS_SIGNIN,
    AuthError,
    SignInResult,
    TimePort,
)
from acme_dashboard.domain.entities import User

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Raised when the provider itself fails while checking credentials.
CALLBACK_ERROR = "CallbackRouteError"
INVALID_PROVIDER = "InvalidProvider"


class UserLookupPort(Protocol):
    def get_by_email(self, email: str) -> User | None: ...


class CredentialsProvider:
    """Sign-in with email and password."""

    method = "credentials"

    def __init__(
        self,
        user_repo: UserLookupPort,
        password_min_length: int = 6,
        session_ttl_minutes: int = 60 * 24,
        time: TimePort | None = None,
    ) -> None:
        self.user_repo = user_repo
        self.password_min_length = password_min_length
        self.session_ttl_minutes = session_ttl_minutes
        self.time = time or SystemClock()

    def _parse(self, credentials: Mapping[str, Any]) -> tuple[str, str] | None:
        email = credentials.get("email")
        password = credentials.get("password")
        if not isinstance(email, str) or not isinstance(password, str):
            return None
        email = email.strip()
        if not EMAIL_PATTERN.match(email) or len(password) < self.password_min_length:
            return None
        return email, password

    def sign_in(self, method: str, credentials: Mapping[str, Any]) -> SignInResult:
        if method != self.method:
            raise AuthError(INVALID_PROVIDER, f"No sign-in provider named {method!r}")

        parsed = self._parse(credentials)
        if parsed is None:
            raise AuthError(CREDENTIALS_SIGNIN)
        email, password = parsed

        user = self.user_repo.get_by_email(email)
        if user is None:
            raise AuthError(CREDENTIALS_SIGNIN)

        try:
            matches = verify_password(password, user.password)
        except ValueError as e:
            # Stored hash is not one the context can read
            logger.error(f"Unusable password hash for user {user.id}: {e}")
            raise AuthError(CALLBACK_ERROR, "Password check failed") from e
        if not matches:
            raise AuthError(CREDENTIALS_SIGNIN)

        token = create_access_token(
            {"sub": user.id},
            expires_delta=timedelta(minutes=self.session_ttl_minutes),
            now_utc=self.time.now_utc(),
        )
        return SignInResult(user=user, session_token=token)
