"""Worker aggregate."""

from __future__ import annotations

from pizzeria.domain.principal.aggregates.principal import Principal


class Worker(Principal):
    """A store employee. The role is free-form text such as "Manager"."""

    def __init__(
        self,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        role: str,
        id: int | None = None,
    ):
        super().__init__(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            id=id,
        )
        self._role = role

    @property
    def role(self) -> str:
        return self._role

    @classmethod
    def create(
        cls,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        role: str,
    ) -> Worker:
        return cls(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            role=role,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        role: str,
    ) -> Worker:
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            role=role,
        )
