"""Salt generator adapter backed by the OS random source."""

from __future__ import annotations

from hashed_password.application.ports.salt_generator_port import SaltGeneratorPort
from hashed_password.domain.hashed_password import random_salt


class SecretsSaltGenerator(SaltGeneratorPort):
    """Uniform alphanumeric salts drawn with :mod:`secrets`."""

    def generate(self, *, length: int) -> str:
        return random_salt(length)
