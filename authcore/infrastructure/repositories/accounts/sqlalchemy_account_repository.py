# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from authcore.domain.accounts.entities import Account
from authcore.domain.accounts.exceptions import AccountUniquenessViolation
from authcore.domain.accounts.repositories import AccountRepository
from authcore.infrastructure.db.models import AccountRow
from authcore.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        first_name=row.first_name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> Account | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(AccountRow).where(AccountRow.email == email)).first()
            return _to_domain(row) if row else None

    def add(self, account: Account) -> Account:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = AccountRow(
                    first_name=account.first_name,
                    email=account.email,
                    password_hash=account.password_hash,
                    created_at=account.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise AccountUniquenessViolation() from exc
