"""Principal domain exceptions."""

from pizzeria.domain.shared.exceptions import ConflictError, ErrorCode


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "An account with that email already exists.",
            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            details={"email": email},
        )
