# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HS256)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from authcore.domain.accounts.entities import AuthToken
from authcore.domain.accounts.exceptions import SigningSecretMissingError
from authcore.domain.accounts.repositories import TokenIssuer

TOKEN_LIFETIME = timedelta(hours=1)
JWT_ALGORITHM = "HS256"


class JwtTokenIssuer(TokenIssuer):
    def __init__(self, secret: str | None, *, lifetime: timedelta = TOKEN_LIFETIME) -> None:
        self._secret = secret
        self._lifetime = lifetime

    def ensure_configured(self) -> None:
        self._signing_key()

    def _signing_key(self) -> str:
        if not self._secret:
            raise SigningSecretMissingError()
        return self._secret

    def issue(self, subject_id: int, first_name: str, now: datetime) -> AuthToken:
        secret = self._signing_key()

        issued_at = int(now.timestamp())
        expires_at = issued_at + int(self._lifetime.total_seconds())
        payload: dict[str, Any] = {
            "id": subject_id,
            "firstName": first_name,
            "iat": issued_at,
            "exp": expires_at,
        }
        value = jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
        return AuthToken(
            value=value,
            subject_id=subject_id,
            first_name=first_name,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
