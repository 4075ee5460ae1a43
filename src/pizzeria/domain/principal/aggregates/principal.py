"""Common base for everyone who can sign in."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PrincipalView:
    """Sanitized principal: safe to put in responses and logs.

    Deliberately has no password hash field.
    """

    id: int
    email: str
    first_name: str
    last_name: str
    role: str


class Principal(ABC):
    """A customer or a worker, as loaded from its credential store."""

    def __init__(
        self,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        id: int | None = None,
    ):
        self._id = id
        self._email = email
        self._first_name = first_name
        self._last_name = last_name
        self._password_hash = password_hash

    @property
    def id(self) -> int | None:
        """Store-assigned id; None until persisted."""
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    @abstractmethod
    def role(self) -> str:
        """Role written into the session on sign-in."""

    def to_view(self) -> PrincipalView:
        if self._id is None:
            msg = f"{type(self).__name__} has not been persisted yet"
            raise ValueError(msg)
        return PrincipalView(
            id=self._id,
            email=self._email,
            first_name=self._first_name,
            last_name=self._last_name,
            role=self.role,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Principal):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, email={self._email})"
