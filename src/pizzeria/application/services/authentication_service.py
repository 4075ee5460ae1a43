"""Authentication service for sign-in, sessions and customer registration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pizzeria.application.dtos import (
    RegisteredCustomer,
    RegistrationProfile,
    SessionStatus,
)
from pizzeria.domain.principal import (
    Address,
    Customer,
    EmailAlreadyExistsError,
    PrincipalView,
)
from pizzeria_auth import (
    InvalidCredentialsError,
    InvalidIdentifierError,
    PasswordHashingService,
    PrincipalType,
    PrincipalTypeResolver,
    SessionStore,
)

if TYPE_CHECKING:
    from pizzeria.domain.principal import (
        CredentialStore,
        CustomerRepository,
        WorkerRepository,
    )

logger = logging.getLogger(__name__)

# Session keys
SESSION_USER_ID = "userId"
SESSION_ROLE = "role"
SESSION_EMAIL = "email"

# One message per sign-in channel, whatever the reason for the failure
SIGN_IN_FAILURE_MESSAGES = {
    PrincipalType.CUSTOMER: "Invalid username or password.",
    PrincipalType.WORKER: "Invalid userid or password.",
}


class AuthenticationService:
    """
    Application service for customer and worker authentication.

    Orchestrates pizzeria_auth infrastructure (password hashing, type
    resolution, sessions) with the two credential stores to provide:
    - Identification (which sign-in form an identifier needs)
    - Sign-in for customers and workers
    - Session status and logout
    - Customer registration

    Each call is independent; only the SessionStore carries state between
    requests. Store failures are not caught here.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        worker_repository: WorkerRepository,
        password_service: PasswordHashingService,
        type_resolver: PrincipalTypeResolver,
    ):
        self._customer_repo = customer_repository
        self._password_service = password_service
        self._type_resolver = type_resolver
        self._stores: dict[PrincipalType, CredentialStore] = {
            PrincipalType.CUSTOMER: customer_repository,
            PrincipalType.WORKER: worker_repository,
        }

    def identify(self, identifier: str | None) -> PrincipalType:
        login_type = self._type_resolver.resolve(identifier)
        logger.info("Identified login type %s", login_type.value)
        if login_type is PrincipalType.UNKNOWN:
            raise InvalidIdentifierError
        return login_type

    async def sign_in(
        self,
        kind: PrincipalType,
        identifier: str,
        password: str,
        session: SessionStore,
    ) -> PrincipalView:
        """Check credentials against the store for ``kind`` and open a session.

        Raises
        ------
        InvalidCredentialsError
            If the identifier belongs to the other kind, is unknown, or the
            password does not match. The message is the same in all cases.
        """
        if kind not in self._stores:
            msg = f"Cannot sign in as {kind!r}"
            raise ValueError(msg)

        failure = InvalidCredentialsError(SIGN_IN_FAILURE_MESSAGES[kind])
        logger.info("Sign-in attempt (%s): %s", kind.value, identifier)

        resolved = self._type_resolver.resolve(identifier)
        if resolved is not kind:
            logger.warning(
                "Sign-in rejected for %s: resolved as %s on the %s channel",
                identifier,
                resolved.value,
                kind.value,
            )
            raise failure

        principal = await self._stores[kind].find_by_identifier(identifier)
        if principal is None:
            self._password_service.consume_dummy_verify(password)
            logger.warning("Sign-in failed for %s: no such account", identifier)
            raise failure

        if not self._password_service.verify(password, principal.password_hash):
            logger.warning("Sign-in failed for %s: password mismatch", identifier)
            raise failure

        view = principal.to_view()
        # A key held before sign-in must not carry the new identity
        await session.cycle_key()
        await session.set(SESSION_USER_ID, view.id)
        await session.set(SESSION_ROLE, view.role)
        await session.set(SESSION_EMAIL, view.email)

        logger.info("Signed in %s (role: %s)", view.email, view.role)
        return view

    async def status(self, session: SessionStore) -> SessionStatus:
        user_id = await session.get(SESSION_USER_ID)
        if user_id is None:
            return SessionStatus(logged_in=False)

        return SessionStatus(
            logged_in=True,
            user_id=user_id,
            role=await session.get(SESSION_ROLE),
            email=await session.get(SESSION_EMAIL),
        )

    async def logout(self, session: SessionStore) -> None:
        await session.invalidate()
        logger.debug("Session invalidated")

    async def register(self, profile: RegistrationProfile) -> RegisteredCustomer:
        """Create a customer account with its address.

        Does not sign the new customer in.

        Raises
        ------
        EmailAlreadyExistsError
            If a customer with this email exists (nothing is written)
        WeakPasswordError
            If the password cannot be hashed
        """
        logger.info("Register attempt for email: %s", profile.email)
        if await self._customer_repo.exists_by_email(profile.email):
            raise EmailAlreadyExistsError(profile.email)

        password_hash = self._password_service.hash(profile.password)
        customer = Customer.create(
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            password_hash=password_hash,
            phone_number=profile.phone,
        )
        address = Address(
            address1=profile.address1,
            address2=profile.address2,
            city=profile.city,
            state=profile.state,
            zip=profile.zip,
        )
        customer_id = await self._customer_repo.create(customer, address)

        logger.info("Customer registered: %s (id: %s)", profile.email, customer_id)
        return RegisteredCustomer(
            id=customer_id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )
