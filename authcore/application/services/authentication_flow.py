# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Boundary between the account use cases and the transport layer.

Every call returns an :class:`AuthOutcome`; no exception leaves this module.
The transport decides which status code each :class:`OutcomeKind` maps to.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from authcore.application.use_cases.accounts.login_account import LoginAccountUseCase
from authcore.application.use_cases.accounts.register_account import RegisterAccountUseCase
from authcore.domain.accounts.entities import Account, AuthToken
from authcore.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    InvalidCredentialsError,
    MalformedPasswordHashError,
    MissingFieldsError,
    SigningSecretMissingError,
)
from authcore.shared.errors.base import SERVER_ERROR_MESSAGE
from authcore.shared.logging import logger


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    CONFLICT_ERROR = "conflict_error"
    AUTHENTICATION_ERROR = "authentication_error"
    CONFIGURATION_ERROR = "configuration_error"
    DECODE_ERROR = "decode_error"
    UNEXPECTED_ERROR = "unexpected_error"

    @property
    def is_server_error(self) -> bool:
        return self in (
            OutcomeKind.CONFIGURATION_ERROR,
            OutcomeKind.DECODE_ERROR,
            OutcomeKind.UNEXPECTED_ERROR,
        )


@dataclass(slots=True, frozen=True)
class AuthOutcome:
    kind: OutcomeKind
    token: str | None = None
    first_name: str | None = None
    message: str | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls, account: Account, token: AuthToken) -> AuthOutcome:
        return cls(kind=OutcomeKind.SUCCESS, token=token.value, first_name=account.first_name)

    @classmethod
    def failure(cls, kind: OutcomeKind, message: str, detail: str | None = None) -> AuthOutcome:
        return cls(kind=kind, message=message, detail=detail)


class AuthenticationFlow:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(
        self, first_name: str | None, email: str | None, password: str | None
    ) -> AuthOutcome:
        return self._run(
            "registration",
            lambda: self._register_use_case.execute(first_name, email, password),
        )

    def login(self, email: str | None, password: str | None) -> AuthOutcome:
        return self._run("login", lambda: self._login_use_case.execute(email, password))

    @staticmethod
    def invalid_input() -> AuthOutcome:
        return AuthOutcome.failure(OutcomeKind.VALIDATION_ERROR, MissingFieldsError.message)

    def _run(
        self, operation: str, action: Callable[[], tuple[Account, AuthToken]]
    ) -> AuthOutcome:
        try:
            account, token = action()
        except MissingFieldsError as exc:
            return AuthOutcome.failure(OutcomeKind.VALIDATION_ERROR, exc.public_message)
        except AccountAlreadyExistsError as exc:
            return AuthOutcome.failure(OutcomeKind.CONFLICT_ERROR, exc.public_message)
        except InvalidCredentialsError as exc:
            return AuthOutcome.failure(OutcomeKind.AUTHENTICATION_ERROR, exc.public_message)
        except SigningSecretMissingError as exc:
            logger.error(f"Error during {operation}: {exc}")
            return AuthOutcome.failure(
                OutcomeKind.CONFIGURATION_ERROR, SERVER_ERROR_MESSAGE, str(exc)
            )
        except MalformedPasswordHashError as exc:
            logger.error(f"Error during {operation}: {exc}")
            return AuthOutcome.failure(OutcomeKind.DECODE_ERROR, SERVER_ERROR_MESSAGE, str(exc))
        except Exception as exc:
            logger.exception(f"Error during {operation}: {type(exc).__name__}")
            return AuthOutcome.failure(
                OutcomeKind.UNEXPECTED_ERROR, SERVER_ERROR_MESSAGE, str(exc) or type(exc).__name__
            )
        return AuthOutcome.success(account, token)
