# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authcore.domain.accounts.entities import Account, AuthToken, is_encodable_text
from authcore.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountUniquenessViolation,
    MissingFieldsError,
)
from authcore.domain.accounts.repositories import (
    AccountRepository,
    Clock,
    PasswordHasher,
    TokenIssuer,
)
from authcore.shared.logging import logger


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
        clock: Clock,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._clock = clock

    def execute(
        self, first_name: str | None, email: str | None, password: str | None
    ) -> tuple[Account, AuthToken]:
        if not first_name or not email or not password:
            raise MissingFieldsError()
        # Every field is stored or hashed as UTF-8.
        if not all(is_encodable_text(value) for value in (first_name, email, password)):
            raise MissingFieldsError()

        if self._accounts.find_by_email(email) is not None:
            logger.info("auth.register: rejected, account exists")
            raise AccountAlreadyExistsError()

        # Nothing is persisted while the issuer cannot sign.
        self._tokens.ensure_configured()

        hashed = self._password_hasher.hash(password)
        try:
            persisted = self._accounts.add(
                Account(id=0, first_name=first_name, email=email, password_hash=hashed)
            )
        except AccountUniquenessViolation as exc:
            logger.info("auth.register: rejected, lost uniqueness race")
            raise AccountAlreadyExistsError() from exc

        token = self._tokens.issue(persisted.id, persisted.first_name, self._clock.now())
        logger.info(f"auth.register: ok account_id={persisted.id}")
        return persisted, token
