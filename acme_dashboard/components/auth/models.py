from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from acme_dashboard.domain.entities import User


@dataclass(frozen=True)
class SignInResult:
    user: User
    session_token: str


@dataclass(frozen=True)
class AuthenticateInput:
    form: Mapping[str, Any]
    prev_state: str | None = None


@dataclass(frozen=True)
class AuthenticateOutput:
    sign_in: SignInResult | None = None
    success: bool = False
    error: str | None = None
