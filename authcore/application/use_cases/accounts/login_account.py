# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authcore.domain.accounts.entities import Account, AuthToken, is_encodable_text
from authcore.domain.accounts.exceptions import InvalidCredentialsError, MissingFieldsError
from authcore.domain.accounts.repositories import (
    AccountRepository,
    Clock,
    PasswordHasher,
    TokenIssuer,
)
from authcore.shared.logging import logger


class LoginAccountUseCase:
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

    def execute(self, email: str | None, password: str | None) -> tuple[Account, AuthToken]:
        if not email or not password:
            raise MissingFieldsError()

        # An email that is not UTF-8 text cannot belong to a stored account.
        account = self._accounts.find_by_email(email) if is_encodable_text(email) else None

        # Unknown email and wrong password must stay indistinguishable.
        if account is None or not self._password_hasher.verify(password, account.password_hash):
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(account.id, account.first_name, self._clock.now())
        logger.info(f"auth.login: ok account_id={account.id}")
        return account, token
