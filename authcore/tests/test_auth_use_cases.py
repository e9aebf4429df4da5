from __future__ import annotations

import jwt
import pytest

from authcore.application.services.token_issuing import JwtTokenIssuer
from authcore.application.use_cases.accounts.login_account import LoginAccountUseCase
from authcore.application.use_cases.accounts.register_account import RegisterAccountUseCase
from authcore.domain.accounts.entities import Account
from authcore.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    InvalidCredentialsError,
    MissingFieldsError,
    SigningSecretMissingError,
)

from .fakes import (
    FIXED_NOW,
    SIGNING_SECRET,
    DeterministicHasher,
    FixedClock,
    InMemoryAccountRepository,
)


def _register(
    accounts: InMemoryAccountRepository, secret: str | None = SIGNING_SECRET
) -> RegisterAccountUseCase:
    return RegisterAccountUseCase(
        accounts=accounts,
        password_hasher=DeterministicHasher(),
        tokens=JwtTokenIssuer(secret),
        clock=FixedClock(),
    )


def _login(accounts: InMemoryAccountRepository) -> LoginAccountUseCase:
    return LoginAccountUseCase(
        accounts=accounts,
        password_hasher=DeterministicHasher(),
        tokens=JwtTokenIssuer(SIGNING_SECRET),
        clock=FixedClock(),
    )


def test_register_account_success(accounts: InMemoryAccountRepository) -> None:
    account, token = _register(accounts).execute("Ada", "ada@example.com", "s3cret1")

    assert account.id == 1
    assert account.first_name == "Ada"
    assert account.password_hash == "hashed:s3cret1"
    assert accounts.find_by_email("ada@example.com") == account
    assert token.subject_id == account.id
    assert token.issued_at == FIXED_NOW


@pytest.mark.parametrize(
    ("first_name", "email", "password"),
    [
        ("", "ada@example.com", "s3cret1"),
        ("Ada", "", "s3cret1"),
        ("Ada", "ada@example.com", ""),
        (None, "ada@example.com", "s3cret1"),
        ("Ada", None, "s3cret1"),
        ("Ada", "ada@example.com", None),
    ],
)
def test_register_requires_every_field(
    accounts: InMemoryAccountRepository,
    first_name: str | None,
    email: str | None,
    password: str | None,
) -> None:
    with pytest.raises(MissingFieldsError):
        _register(accounts).execute(first_name, email, password)

    assert accounts.count() == 0
    assert accounts.add_calls == 0


def test_register_duplicate_email_raises(accounts: InMemoryAccountRepository) -> None:
    use_case = _register(accounts)
    use_case.execute("Ada", "ada@example.com", "s3cret1")

    with pytest.raises(AccountAlreadyExistsError):
        use_case.execute("Grace", "ada@example.com", "other-pass")

    assert accounts.count() == 1
    assert accounts.add_calls == 1


def test_register_maps_store_uniqueness_violation_to_conflict(
    accounts: InMemoryAccountRepository,
) -> None:
    accounts.race_winner = Account(
        id=99, first_name="Racer", email="ada@example.com", password_hash="hashed:x"
    )

    with pytest.raises(AccountAlreadyExistsError):
        _register(accounts).execute("Ada", "ada@example.com", "s3cret1")

    assert accounts.find_by_email("ada@example.com").first_name == "Racer"


def test_register_without_secret_creates_no_account(
    accounts: InMemoryAccountRepository,
) -> None:
    with pytest.raises(SigningSecretMissingError):
        _register(accounts, secret=None).execute("Ada", "ada@example.com", "s3cret1")

    assert accounts.count() == 0
    assert accounts.add_calls == 0


def test_login_account_success(accounts: InMemoryAccountRepository) -> None:
    registered, _ = _register(accounts).execute("Ada", "ada@example.com", "s3cret1")

    account, token = _login(accounts).execute("ada@example.com", "s3cret1")

    assert account == registered
    claims = jwt.decode(
        token.value,
        SIGNING_SECRET,
        algorithms=["HS256"],
        options={"verify_exp": False, "verify_iat": False},
    )
    assert (claims["id"], claims["firstName"]) == (registered.id, "Ada")


def test_login_unknown_email_and_wrong_password_are_indistinguishable(
    accounts: InMemoryAccountRepository,
) -> None:
    _register(accounts).execute("Ada", "ada@example.com", "s3cret1")
    login = _login(accounts)

    with pytest.raises(InvalidCredentialsError) as unknown:
        login.execute("nobody@example.com", "s3cret1")
    with pytest.raises(InvalidCredentialsError) as wrong:
        login.execute("ada@example.com", "wrong")

    assert unknown.value.to_dict() == wrong.value.to_dict()
    assert unknown.value.public_message == "Invalid credentials"


def test_login_email_match_is_exact(accounts: InMemoryAccountRepository) -> None:
    _register(accounts).execute("Ada", "ada@example.com", "s3cret1")

    with pytest.raises(InvalidCredentialsError):
        _login(accounts).execute("ADA@example.com", "s3cret1")


@pytest.mark.parametrize(("email", "password"), [("", "s3cret1"), ("ada@example.com", None)])
def test_login_requires_both_fields(
    accounts: InMemoryAccountRepository, email: str | None, password: str | None
) -> None:
    with pytest.raises(MissingFieldsError):
        _login(accounts).execute(email, password)
