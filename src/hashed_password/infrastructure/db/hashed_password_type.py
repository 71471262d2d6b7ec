"""SQLAlchemy column type mapping text columns to hashed password values."""

from __future__ import annotations

from typing import Any

import sqlalchemy as sa

from hashed_password.domain.hashed_password import HashedPassword


class HashedPasswordType(sa.types.TypeDecorator[HashedPassword]):
    """Opaque text column holding the encoded ``<salt>$<hash>`` string."""

    impl = sa.Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: sa.Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, HashedPassword):
            return value.as_str()
        if isinstance(value, str):
            return value
        raise TypeError(f"cannot bind {type(value).__name__} as hashed password")

    def process_result_value(self, value: Any, dialect: sa.Dialect) -> HashedPassword | None:
        _ = dialect
        if value is None:
            return None
        return HashedPassword(str(value))
