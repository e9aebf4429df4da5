from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from authcore.application.services.token_issuing import JwtTokenIssuer
from authcore.domain.accounts.exceptions import SigningSecretMissingError

from .fakes import FIXED_NOW, SIGNING_SECRET

_DECODE_OPTIONS = {"verify_exp": False, "verify_iat": False}


def test_issue_encodes_minimal_claims(token_issuer: JwtTokenIssuer) -> None:
    token = token_issuer.issue(7, "Ada", FIXED_NOW)

    claims = jwt.decode(
        token.value, SIGNING_SECRET, algorithms=["HS256"], options=_DECODE_OPTIONS
    )
    issued_at = int(FIXED_NOW.timestamp())
    assert claims == {"id": 7, "firstName": "Ada", "iat": issued_at, "exp": issued_at + 3600}


def test_expiry_is_exactly_one_hour_after_issuance(token_issuer: JwtTokenIssuer) -> None:
    token = token_issuer.issue(7, "Ada", FIXED_NOW)

    assert token.issued_at == FIXED_NOW
    assert token.expires_at - token.issued_at == timedelta(hours=1)
    assert (token.subject_id, token.first_name) == (7, "Ada")


def test_token_is_signed_with_hs256(token_issuer: JwtTokenIssuer) -> None:
    token = token_issuer.issue(7, "Ada", FIXED_NOW)

    assert jwt.get_unverified_header(token.value)["alg"] == "HS256"
    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(
            token.value, "another-secret-entirely-0123456789", algorithms=["HS256"],
            options=_DECODE_OPTIONS,
        )


def test_issue_is_a_pure_function_of_its_inputs(token_issuer: JwtTokenIssuer) -> None:
    first = token_issuer.issue(7, "Ada", FIXED_NOW)
    second = token_issuer.issue(7, "Ada", FIXED_NOW)
    later = token_issuer.issue(7, "Ada", FIXED_NOW + timedelta(seconds=1))

    assert first.value == second.value
    assert later.value != first.value


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_refuses_to_issue(secret: str | None) -> None:
    issuer = JwtTokenIssuer(secret)

    with pytest.raises(SigningSecretMissingError):
        issuer.ensure_configured()
    with pytest.raises(SigningSecretMissingError):
        issuer.issue(7, "Ada", FIXED_NOW)
