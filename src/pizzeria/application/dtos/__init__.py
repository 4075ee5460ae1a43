from pizzeria.application.dtos.auth_dto import (
    RegisteredCustomer,
    RegistrationProfile,
    SessionStatus,
)

__all__ = [
    "RegisteredCustomer",
    "RegistrationProfile",
    "SessionStatus",
]
