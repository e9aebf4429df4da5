"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import re

from werkzeug.security import check_password_hash, generate_password_hash

from authcore.domain.accounts.entities import is_encodable_text
from authcore.domain.accounts.exceptions import MalformedPasswordHashError
from authcore.domain.accounts.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt"
_PBKDF2_DIGESTS = frozenset(
    {"sha1", "sha224", "sha256", "sha384", "sha512", "sha3_224", "sha3_256", "sha3_384", "sha3_512"}
)
_SCRYPT_DEFAULTS = (2**15, 8, 1)
_SCRYPT_DIGEST_SIZE = 64
# hashlib.scrypt rejects maxmem above INT_MAX; werkzeug passes 132 * n * r * p.
_SCRYPT_MAX_MEMORY = 2**31 - 1
_MAX_ITERATIONS = 2**31 - 1
_HEX_DIGEST = re.compile(r"[0-9a-f]+")
_SALT = re.compile(r"[A-Za-z0-9]+")


def _positive_int(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedPasswordHashError(f"parameter {raw!r} is not a positive integer")
    value = int(raw)
    if value < 1:
        raise MalformedPasswordHashError(f"parameter {raw!r} is not a positive integer")
    return value


def _check_scrypt_params(args: list[str]) -> None:
    if not args:
        n, r, p = _SCRYPT_DEFAULTS
    elif len(args) == 3:
        n, r, p = (_positive_int(arg) for arg in args)
    else:
        raise MalformedPasswordHashError("scrypt takes 3 parameters")
    if n < 2 or n & (n - 1):
        raise MalformedPasswordHashError("scrypt N must be a power of 2 greater than 1")
    if 132 * n * r * p > _SCRYPT_MAX_MEMORY:
        raise MalformedPasswordHashError("scrypt parameters exceed the memory limit")


def _pbkdf2_digest_size(args: list[str]) -> int:
    if len(args) > 2:
        raise MalformedPasswordHashError("pbkdf2 takes 2 parameters")
    digest_name = args[0] if args else "sha256"
    if digest_name not in _PBKDF2_DIGESTS:
        raise MalformedPasswordHashError(f"unsupported pbkdf2 digest {digest_name!r}")
    if len(args) == 2 and _positive_int(args[1]) > _MAX_ITERATIONS:
        raise MalformedPasswordHashError("pbkdf2 iteration count is too large")
    return hashlib.new(digest_name).digest_size


def _check_format(hashed: object) -> None:
    """Reject anything werkzeug could not verify before it gets there."""
    if not isinstance(hashed, str):
        raise MalformedPasswordHashError("not a string")
    parts = hashed.split("$", 2)
    if len(parts) != 3 or not all(parts):
        raise MalformedPasswordHashError("expected method$salt$digest")
    method, salt, digest = parts
    name, *args = method.split(":")
    if name == "scrypt":
        _check_scrypt_params(args)
        digest_size = _SCRYPT_DIGEST_SIZE
    elif name == "pbkdf2":
        digest_size = _pbkdf2_digest_size(args)
    else:
        raise MalformedPasswordHashError(f"unknown method {name!r}")
    if not _SALT.fullmatch(salt):
        raise MalformedPasswordHashError("salt is not alphanumeric")
    if not _HEX_DIGEST.fullmatch(digest):
        raise MalformedPasswordHashError("digest is not hex")
    if len(digest) != digest_size * 2:
        raise MalformedPasswordHashError(f"digest is not {digest_size} bytes")


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes in werkzeug's ``method$salt$digest`` format.

    The default ``scrypt`` method (N=32768, r=8, p=1) costs tens of
    milliseconds per call; ``pbkdf2`` methods are accepted for stored hashes
    and may be selected through ``PASSWORD_HASH_METHOD``.

    Passwords are UTF-8 text. A password that cannot be encoded (a lone
    surrogate, say) never verifies; callers reject it before hashing.
    """

    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        _check_format(hashed)
        if not is_encodable_text(password):
            return False
        return bool(check_password_hash(hashed, password))

