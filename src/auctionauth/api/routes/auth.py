"""Sign-up, login and logout endpoints."""

from fastapi import APIRouter, Response, status

from auctionauth.api.dependencies import (
    RegistryDep,
    SessionManagerDep,
    SessionTokenDep,
    SettingsDep,
    VerifierDep,
)
from auctionauth.api.models import (
    AccountResponse,
    APIResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    account_to_response,
)
from auctionauth.auth import (
    InvalidCredentialsError,
    MissingFieldError,
    RegistrationForm,
)
from auctionauth.auth.fields import is_blank

LOGIN_PATH = "/auth/login"

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/login", response_model=APIResponse[MessageResponse])
def login_prompt() -> APIResponse[MessageResponse]:
    """Unauthenticated surface that denied requests are sent to."""
    return APIResponse(data=MessageResponse(message="Please log in with your student ID"))


@router.post("/login", response_model=APIResponse[LoginResponse])
def login(
    credentials: LoginRequest,
    response: Response,
    verifier: VerifierDep,
    sessions: SessionManagerDep,
    settings: SettingsDep,
    current_token: SessionTokenDep,
) -> APIResponse[LoginResponse]:
    """Log in and start a session.

    Any session the client already presents is revoked first.
    """
    if is_blank(credentials.student_id) or not credentials.password:
        raise MissingFieldError()

    account = verifier.login(credentials.student_id, credentials.password)
    if account is None:
        raise InvalidCredentialsError()

    sessions.revoke(current_token)
    token = sessions.create(account.student_id)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        httponly=True,
        samesite="lax",
    )
    return APIResponse(data=LoginResponse(token=token, account=account_to_response(account)))


@router.get("/signup", response_model=APIResponse[MessageResponse])
def signup_prompt() -> APIResponse[MessageResponse]:
    """Sign-up form entry point."""
    return APIResponse(data=MessageResponse(message="Please sign up with your student ID"))


@router.post(
    "/signup",
    response_model=APIResponse[AccountResponse],
    status_code=status.HTTP_201_CREATED,
)
def signup(form: SignupRequest, registry: RegistryDep) -> APIResponse[AccountResponse]:
    """Register a new student account."""
    created = registry.register(RegistrationForm(**form.model_dump()))
    return APIResponse(data=account_to_response(created))


@router.api_route("/logout", methods=["GET", "POST"], response_model=APIResponse[MessageResponse])
def logout(
    response: Response,
    token: SessionTokenDep,
    sessions: SessionManagerDep,
    settings: SettingsDep,
) -> APIResponse[MessageResponse]:
    """End the current session. Succeeds even without one."""
    sessions.revoke(token)
    response.delete_cookie(settings.session_cookie_name)
    return APIResponse(data=MessageResponse(message="Logged out"))
