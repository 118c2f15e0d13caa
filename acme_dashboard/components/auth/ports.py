from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

from .models import SignInResult

CREDENTIALS_SIGNIN = "CredentialsSignin"


class AuthError(Exception):
    """Authentication failure raised by an identity provider.

    ``type`` discriminates the failure, e.g. ``CredentialsSignin`` for a bad
    email/password pair.
    """

    def __init__(self, type: str, message: str | None = None) -> None:
        super().__init__(message or type)
        self.type = type


class IdentityProviderPort(Protocol):
    """Port for the external identity provider."""

    def sign_in(self, method: str, credentials: Mapping[str, Any]) -> SignInResult:
        """
        Verify ``credentials`` with the named sign-in method.

        Raises:
            AuthError: credentials were rejected or the method is unusable.
        """
        ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
