"""Salted and peppered SHA-256 password value object."""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hashed_password.application.ports.salt_generator_port import SaltGeneratorPort

SALT_LENGTH = 6
DELIMITER = "$"
SALT_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
_SALT_PATTERN = re.compile(rf"[{re.escape(SALT_ALPHABET)}]{{{SALT_LENGTH}}}")


def random_salt(length: int = SALT_LENGTH) -> str:
    """Return a uniform alphanumeric salt drawn from the OS random source."""

    if length <= 0:
        raise ValueError("salt length must be positive")
    return "".join(secrets.choice(SALT_ALPHABET) for _ in range(length))


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogatepass")


def _digest(*, salt: str, plain: str | bytes, secret: str | bytes) -> str:
    # NOTE: a single SHA-256 pass is not a password KDF. Kept so stored values stay valid.
    row = _to_bytes(salt) + _to_bytes(plain) + _to_bytes(secret).hex().encode("ascii")
    return hashlib.sha256(row).hexdigest()


@dataclass(frozen=True)
class HashedPassword:
    """Encoded ``<salt>$<sha256 hex>`` password representation.

    The value is opaque to callers: persist it verbatim and check candidates
    with :meth:`validate`. Wrapping a stored string performs no shape check,
    a malformed value simply never validates.
    """

    value: str

    @classmethod
    def from_plain(
        cls,
        plain: str | bytes,
        secret: str | bytes,
        *,
        salt_generator: SaltGeneratorPort | None = None,
    ) -> HashedPassword:
        """Hash ``plain`` with a fresh random salt and the application ``secret``."""

        if salt_generator is None:
            salt = random_salt()
        else:
            salt = salt_generator.generate(length=SALT_LENGTH)
        return cls.from_plain_with_salt(plain, secret, salt=salt)

    @classmethod
    def from_plain_with_salt(
        cls,
        plain: str | bytes,
        secret: str | bytes,
        *,
        salt: str,
    ) -> HashedPassword:
        """Hash ``plain`` with a caller-provided salt of six alphanumeric characters."""

        if _SALT_PATTERN.fullmatch(salt) is None:
            raise ValueError(f"salt must be {SALT_LENGTH} alphanumeric characters")
        return cls(f"{salt}{DELIMITER}{_digest(salt=salt, plain=plain, secret=secret)}")

    def validate(self, plain: str | bytes, secret: str | bytes) -> bool:
        """Return whether ``plain`` hashed with ``secret`` matches the stored value."""

        if not self.is_well_formed():
            return False

        salt, _, stored_hash = self.value.partition(DELIMITER)
        candidate = _digest(salt=salt, plain=plain, secret=secret)
        return hmac.compare_digest(candidate.encode("ascii"), _to_bytes(stored_hash))

    def is_well_formed(self) -> bool:
        """Return whether the value splits into a non-empty salt and hash."""

        salt, delimiter, stored_hash = self.value.partition(DELIMITER)
        return bool(delimiter and salt and stored_hash)

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
