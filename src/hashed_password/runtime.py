"""Composition helpers wiring settings, logging and the password hasher."""

from __future__ import annotations

import logging

from hashed_password.application.ports.password_hasher_port import PasswordHasherPort
from hashed_password.config.settings import Settings, load_settings
from hashed_password.infrastructure.logging import configure_logging
from hashed_password.infrastructure.security.password_hasher import (
    PepperedSha256PasswordHasher,
)

logger = logging.getLogger(__name__)


def build_password_hasher(settings: Settings | None = None) -> PasswordHasherPort:
    """Build the peppered SHA-256 hasher from runtime settings."""

    resolved = settings or load_settings()
    configure_logging(level=resolved.log_level)
    logger.info("password_hasher_ready scheme=sha256-peppered")
    return PepperedSha256PasswordHasher(secret=resolved.password_secret_bytes)
