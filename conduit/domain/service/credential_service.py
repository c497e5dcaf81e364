"""Credential domain service."""

import logfire

from conduit.domain.model.user import User
from conduit.util.password import hash_password, verify_password

from .base import Service


class CredentialService(Service):
    """Sets and checks user passwords.

    Only the salt/hash pair ever reaches the user model or the logs.
    """

    def set_password(self, user: User, password: str) -> User:
        """Return a copy of the user holding fresh credentials for ``password``.

        Args:
            user: User to update
            password: New plaintext password

        Returns:
            Updated user (not yet persisted)
        """
        with logfire.span("credential_service.set_password", user_id=str(user.id)):
            credentials = hash_password(password)
            return user.model_copy(
                update={
                    "password_salt": credentials.salt,
                    "password_hash": credentials.hash,
                }
            )

    def verify(self, user: User, password: str) -> bool:
        """Check a plaintext password against the user's stored credentials.

        Args:
            user: User whose credentials to check
            password: Plaintext password

        Returns:
            True if the password matches
        """
        with logfire.span("credential_service.verify", user_id=str(user.id)):
            valid = verify_password(password, user.password_salt, user.password_hash)
            if not valid:
                logfire.info("Password verification failed", user_id=str(user.id))
            return valid
