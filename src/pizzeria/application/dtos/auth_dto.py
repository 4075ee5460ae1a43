"""DTOs for sign-in, session status and registration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrationProfile:
    """Everything a new customer submits when creating an account."""

    email: str
    password: str
    first_name: str
    last_name: str
    phone: str
    address1: str
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


@dataclass(frozen=True)
class RegisteredCustomer:
    """Sanitized result of a registration."""

    id: int
    email: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class SessionStatus:
    """What the current session says about who is signed in."""

    logged_in: bool
    user_id: int | None = None
    role: str | None = None
    email: str | None = None
