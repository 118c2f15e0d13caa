from .models import AuthenticateInput, AuthenticateOutput
from .ports import CREDENTIALS_SIGNIN, AuthError, IdentityProviderPort

SIGN_IN_METHOD = "credentials"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."


def run_authenticate(
    inp: AuthenticateInput, identity_provider: IdentityProviderPort
) -> AuthenticateOutput:
    # Only provider auth errors are mapped; anything else propagates unchanged.
    try:
        result = identity_provider.sign_in(SIGN_IN_METHOD, inp.form)
    except AuthError as error:
        if error.type == CREDENTIALS_SIGNIN:
            return AuthenticateOutput(success=False, error=INVALID_CREDENTIALS_MESSAGE)
        return AuthenticateOutput(success=False, error=GENERIC_AUTH_MESSAGE)

    return AuthenticateOutput(sign_in=result, success=True)

