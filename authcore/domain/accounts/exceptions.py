# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authcore.shared.errors.base import DomainError, InfrastructureError


class MissingFieldsError(DomainError):
    code = "missing_fields"
    message = "All fields are required"


class AccountAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class SigningSecretMissingError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="signing_secret_missing")

    def __str__(self) -> str:
        return "JWT_SECRET is not configured"


class MalformedPasswordHashError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__(code="password_hash_malformed", context={"reason": reason})

    def __str__(self) -> str:
        return f"stored password hash is malformed: {self.context['reason']}"


class AccountUniquenessViolation(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="account_uniqueness_violation")
