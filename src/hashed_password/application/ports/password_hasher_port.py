"""Port for hashing passwords into persisted ``<salt>$<digest>`` strings."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """String in / string out contract for callers storing opaque text columns."""

    def hash_password(self, password: str) -> str:
        """Return the encoded salted hash; a fresh salt is drawn on every call."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Return True only when ``password`` matches; malformed hashes yield False."""
