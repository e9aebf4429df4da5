from __future__ import annotations

import pytest

from authcore.application.services.password_hashing import WerkzeugPasswordHasher
from authcore.application.services.token_issuing import JwtTokenIssuer

from .fakes import SIGNING_SECRET, InMemoryAccountRepository


@pytest.fixture()
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(SIGNING_SECRET)


@pytest.fixture(scope="session")
def password_hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher()
