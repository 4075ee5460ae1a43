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

__all__ = [
    "IdentifyRequest",
    "IdentifyResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "RegisteredUserResponse",
    "SignInRequest",
    "SignInResponse",
    "StatusResponse",
    "UserResponse",
]
