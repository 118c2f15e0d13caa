from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from acme_dashboard.adapters.auth.credentials import CredentialsProvider
from acme_dashboard.api.deps import (
    get_current_user,
    get_form_data,
    get_identity_provider,
    get_rules,
)
from acme_dashboard.api.schemas import LoginErrorResponse, UserResponse
from acme_dashboard.components.auth import AuthenticateInput, run_authenticate
from acme_dashboard.domain.entities import User
from acme_dashboard.rules.models import Rules

router = APIRouter()


@router.post("/login")
def login(
    form: dict[str, str] = Depends(get_form_data),
    provider: CredentialsProvider = Depends(get_identity_provider),
    rules: Rules = Depends(get_rules),
) -> Response:
    """Sign in with email and password, then continue to the dashboard."""
    result = run_authenticate(AuthenticateInput(form=form), provider)
    if not result.success or result.sign_in is None:
        body = LoginErrorResponse(message=result.error)
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump())

    sessions = rules.auth.sessions
    resp = RedirectResponse(url=rules.routes.post_login, status_code=status.HTTP_303_SEE_OTHER)
    # Set HttpOnly Cookie
    resp.set_cookie(
        key=sessions.cookie.name,
        value=f"Bearer {result.sign_in.session_token}",
        httponly=sessions.cookie.http_only,
        max_age=sessions.ttl_minutes * 60,
        expires=sessions.ttl_minutes * 60,
        samesite=sessions.cookie.same_site,  # type: ignore[arg-type]
        secure=sessions.cookie.secure,
    )
    return resp


@router.post("/logout")
def logout(response: Response, rules: Rules = Depends(get_rules)) -> dict[str, str]:
    """Log out user by clearing cookie."""
    response.delete_cookie(key=rules.auth.sessions.cookie.name)
    return {"status": "success"}


@router.get("/me", response_model=UserResponse)
def read_users_me(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Get current user info."""
    return UserResponse(id=current_user.id, name=current_user.name, email=current_user.email)
