"""Port for random salt generation."""

from __future__ import annotations

from typing import Protocol


class SaltGeneratorPort(Protocol):
    """Salt source contract."""

    def generate(self, *, length: int) -> str:
        """Return one alphanumeric salt of exactly ``length`` characters."""
