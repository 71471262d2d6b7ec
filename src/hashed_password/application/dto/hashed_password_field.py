"""Pydantic field type carrying a hashed password as a plain string."""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from hashed_password.domain.hashed_password import HashedPassword


def _coerce_hashed_password(value: object) -> HashedPassword:
    """Wrap a stored string verbatim; shape problems surface only on validate."""

    if isinstance(value, HashedPassword):
        return value
    if isinstance(value, str):
        return HashedPassword(value)
    raise ValueError("hashed password must be a string")


def _serialize_hashed_password(value: HashedPassword) -> str:
    return value.as_str()


HashedPasswordField = Annotated[
    HashedPassword,
    PlainValidator(_coerce_hashed_password),
    PlainSerializer(_serialize_hashed_password, return_type=str),
    WithJsonSchema({"type": "string"}),
]
