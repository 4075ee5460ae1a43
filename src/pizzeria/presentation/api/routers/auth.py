"""Authentication router for sign-in, session status and registration."""

import logging

from fastapi import APIRouter, Response, status

from pizzeria.application.dtos import RegistrationProfile
from pizzeria.domain.shared.exceptions import DomainException, ErrorCode
from pizzeria.presentation.api.dependencies import (
    AuthService,
    DBSession,
    HttpSession,
    SettingsDep,
)
from pizzeria.presentation.api.schemas.auth import (
    IdentifyRequest,
    IdentifyResponse,
    MessageResponse,
    RegisteredUserResponse,
    RegisterRequest,
    RegisterResponse,
    SignInRequest,
    SignInResponse,
    StatusResponse,
    UserResponse,
)
from pizzeria_auth import AuthError, PrincipalType, ServerSideSession
from pizzeria_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _sync_session_cookie(
    response: Response,
    http_session: ServerSideSession,
    settings: Settings,
) -> None:
    """Mirror the server-side session state into the session cookie.

    The cookie is:
    - HttpOnly: Not accessible to JavaScript
    - Secure/SameSite/Domain: From settings
    - Max-Age: The session lifetime, refreshed on every write
    """
    if http_session.invalidated:
        response.delete_cookie(
            key=settings.session_cookie_name,
            path="/",
            domain=settings.api_cookie_domain,
        )
        return

    if http_session.modified and http_session.key:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=http_session.key,
            httponly=True,
            secure=settings.api_cookie_secure,
            samesite=settings.api_cookie_samesite,
            max_age=settings.session_max_age_seconds,
            path="/",
            domain=settings.api_cookie_domain,
        )


@router.get(
    "/status",
    response_model_exclude_none=True,
    summary="Report whether the caller is signed in",
)
async def session_status(
    auth_service: AuthService,
    http_session: HttpSession,
) -> StatusResponse:
    current = await auth_service.status(http_session)
    if not current.logged_in:
        return StatusResponse(
            logged_in=False,
            message="No user is currently logged in.",
        )

    return StatusResponse(
        logged_in=True,
        user_id=current.user_id,
        role=current.role,
        email=current.email,
        message="User is logged in.",
    )


@router.post("/logout", summary="Destroy the caller's session")
async def logout(
    response: Response,
    auth_service: AuthService,
    http_session: HttpSession,
    session: DBSession,
    settings: SettingsDep,
) -> MessageResponse:
    """Always succeeds, even without a session."""
    await auth_service.logout(http_session)
    await session.commit()

    _sync_session_cookie(response, http_session, settings)
    return MessageResponse(message="Logged out.")


@router.post(
    "/identify",
    summary="Decide which sign-in form an identifier needs",
    responses={
        200: {"description": "CUSTOMER or WORKER"},
        400: {"description": "Missing or invalid identifier"},
    },
)
async def identify(
    request: IdentifyRequest,
    auth_service: AuthService,
) -> IdentifyResponse:
    login_type = auth_service.identify(request.email)
    return IdentifyResponse(login_type=login_type.value)


async def _sign_in(
    kind: PrincipalType,
    request: SignInRequest,
    response: Response,
    auth_service: AuthService,
    http_session: ServerSideSession,
    session: DBSession,
    settings: Settings,
) -> UserResponse:
    view = await auth_service.sign_in(
        kind,
        request.username,
        request.password,
        http_session,
    )
    await session.commit()

    _sync_session_cookie(response, http_session, settings)
    return UserResponse(
        id=view.id,
        email=view.email,
        first_name=view.first_name,
        last_name=view.last_name,
        role=view.role,
    )


@router.post(
    "/signin/customer",
    summary="Sign in as a customer",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def sign_in_customer(
    request: SignInRequest,
    response: Response,
    auth_service: AuthService,
    http_session: HttpSession,
    session: DBSession,
    settings: SettingsDep,
) -> SignInResponse:
    user = await _sign_in(
        PrincipalType.CUSTOMER,
        request,
        response,
        auth_service,
        http_session,
        session,
        settings,
    )
    return SignInResponse(message="Login successful", user=user)


@router.post(
    "/signin/worker",
    summary="Sign in as a worker",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def sign_in_worker(
    request: SignInRequest,
    response: Response,
    auth_service: AuthService,
    http_session: HttpSession,
    session: DBSession,
    settings: SettingsDep,
) -> SignInResponse:
    user = await _sign_in(
        PrincipalType.WORKER,
        request,
        response,
        auth_service,
        http_session,
        session,
        settings,
    )
    return SignInResponse(message="Employee Login successful", user=user)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Password cannot be hashed"},
        409: {"description": "Email already registered"},
        500: {"description": "Store failure"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> RegisterResponse:
    """
    Create a customer account and its address in one transaction.

    Does not sign the new customer in.
    """
    profile = RegistrationProfile(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
        address1=request.address1,
        address2=request.address2,
        city=request.city,
        state=request.state,
        zip=request.zip,
    )

    try:
        registered = await auth_service.register(profile)
        await session.commit()
    except (DomainException, AuthError):
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        logger.exception("Registration failed: %s", e)
        msg = "Registration failed"
        raise DomainException(msg, code=ErrorCode.INTERNAL_ERROR) from e

    return RegisterResponse(
        message="Account created successfully.",
        user=RegisteredUserResponse(
            id=registered.id,
            email=registered.email,
            first_name=registered.first_name,
            last_name=registered.last_name,
        ),
    )
