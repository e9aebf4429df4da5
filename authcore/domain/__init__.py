# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts.entities import Account, AuthToken
from .accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountUniquenessViolation,
    InvalidCredentialsError,
    MalformedPasswordHashError,
    MissingFieldsError,
    SigningSecretMissingError,
)

__all__ = [
    "Account",
    "AuthToken",
    "AccountAlreadyExistsError",
    "AccountUniquenessViolation",
    "InvalidCredentialsError",
    "MalformedPasswordHashError",
    "MissingFieldsError",
    "SigningSecretMissingError",
]
