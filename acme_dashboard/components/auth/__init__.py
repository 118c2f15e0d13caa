"""
Auth component - Credential sign-in.

Delegates verification to an identity provider and maps its credential
errors to messages for the login form.
"""

from .component import (
    GENERIC_AUTH_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    SIGN_IN_METHOD,
    run_authenticate,
)
from .models import AuthenticateInput, AuthenticateOutput, SignInResult
from .ports import CREDENTIALS_SIGNIN, AuthError, IdentityProviderPort, TimePort

__all__ = [
    # Entry points
    "run_authenticate",
    # Messages
    "GENERIC_AUTH_MESSAGE",
    "INVALID_CREDENTIALS_MESSAGE",
    "SIGN_IN_METHOD",
    # Models
    "AuthenticateInput",
    "AuthenticateOutput",
    "SignInResult",
    # Ports
    "AuthError",
    "CREDENTIALS_SIGNIN",
    "IdentityProviderPort",
    "TimePort",
]
