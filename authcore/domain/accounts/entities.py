# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    first_name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(slots=True, frozen=True)
class AuthToken:
    """Signed bearer token together with the claims it was minted from."""

    value: str = field(repr=False)
    subject_id: int
    first_name: str
    issued_at: datetime
    expires_at: datetime


def is_encodable_text(value: str) -> bool:
    """Whether ``value`` survives UTF-8 encoding (no lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
