from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

from authcore.application.services.authentication_flow import AuthenticationFlow
from authcore.application.services.token_issuing import JwtTokenIssuer
from authcore.application.use_cases.accounts.login_account import LoginAccountUseCase
from authcore.application.use_cases.accounts.register_account import RegisterAccountUseCase
from authcore.domain.accounts.entities import Account
from authcore.domain.accounts.exceptions import AccountUniquenessViolation
from authcore.domain.accounts.repositories import AccountRepository, Clock, PasswordHasher

SIGNING_SECRET = "unit-test-signing-secret-0123456789"
FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._seq = 1
        self.add_calls = 0
        self.race_winner: Account | None = None

    def find_by_email(self, email: str) -> Account | None:
        return self._accounts.get(email)

    def add(self, account: Account) -> Account:
        self.add_calls += 1
        if self.race_winner is not None:
            # Another request inserted the same email between lookup and insert.
            self._accounts[self.race_winner.email] = self.race_winner
            self.race_winner = None
        if account.email in self._accounts:
            raise AccountUniquenessViolation()
        new_account = replace(account, id=self._seq)
        self._seq += 1
        self._accounts[new_account.email] = new_account
        return new_account

    def count(self) -> int:
        return len(self._accounts)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FixedClock(Clock):
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


def build_flow(
    accounts: AccountRepository,
    *,
    hasher: PasswordHasher | None = None,
    secret: str | None = SIGNING_SECRET,
) -> AuthenticationFlow:
    hasher = hasher or DeterministicHasher()
    tokens = JwtTokenIssuer(secret)
    clock = FixedClock()
    return AuthenticationFlow(
        register_use_case=RegisterAccountUseCase(
            accounts=accounts, password_hasher=hasher, tokens=tokens, clock=clock
        ),
        login_use_case=LoginAccountUseCase(
            accounts=accounts, password_hasher=hasher, tokens=tokens, clock=clock
        ),
    )

