# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Account, AuthToken


class AccountRepository(Protocol):
    def find_by_email(self, email: str) -> Account | None: ...
    def add(self, account: Account) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def ensure_configured(self) -> None: ...
    def issue(self, subject_id: int, first_name: str, now: datetime) -> AuthToken: ...


class Clock(Protocol):
    def now(self) -> datetime: ...
