"""Password hashing service using bcrypt.

Provides secure password hashing and verification. Digests are
self-describing (``$2b$<cost>$<salt><hash>``), so verification needs
nothing but the stored string.
"""

from functools import cached_property

import bcrypt

from pizzeria_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> digest = service.hash("Pizza123!")
    >>> service.verify("Pizza123!", digest)
    True
    >>> service.verify("WrongPass!", digest)
    False
    """

    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which takes a few hundred milliseconds on commodity hardware.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        bcrypt re-derives the digest with the cost and salt embedded in
        ``password_hash`` and compares in constant time.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format, or input bcrypt refuses
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password can be hashed safely.

        Current requirements:
        - Not empty
        - At most 72 bytes once UTF-8 encoded

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def consume_dummy_verify(self, password: str) -> None:
        """Spend one verification on a throwaway hash.

        Called when no account matches, so an unknown identifier takes as
        long to reject as a wrong password.
        """
        self.verify(password or "", self._dummy_hash)

    @cached_property
    def _dummy_hash(self) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(b"dummy-password-not-used-for-auth", salt).decode("utf-8")
