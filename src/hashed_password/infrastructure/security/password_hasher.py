"""Peppered SHA-256 password hasher adapter."""

from __future__ import annotations

import logging

from hashed_password.application.ports.password_hasher_port import PasswordHasherPort
from hashed_password.application.ports.salt_generator_port import SaltGeneratorPort
from hashed_password.domain.hashed_password import HashedPassword
from hashed_password.infrastructure.security.salt_generator import SecretsSaltGenerator

logger = logging.getLogger(__name__)


class PepperedSha256PasswordHasher(PasswordHasherPort):
    """Password hashing adapter using salted SHA-256 with an application secret."""

    def __init__(
        self,
        *,
        secret: str | bytes,
        salt_generator: SaltGeneratorPort | None = None,
    ) -> None:
        if not secret:
            raise ValueError("password secret cannot be empty")
        self._secret = secret
        self._salt_generator = salt_generator or SecretsSaltGenerator()

    def hash_password(self, password: str) -> str:
        hashed = HashedPassword.from_plain(
            password,
            self._secret,
            salt_generator=self._salt_generator,
        )
        return hashed.as_str()

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        stored = HashedPassword(password_hash)
        if not stored.is_well_formed():
            logger.debug("password_hash_malformed length=%s", len(password_hash))
            return False
        return stored.validate(password, self._secret)
