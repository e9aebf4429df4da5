from __future__ import annotations

import pytest
from pydantic import ValidationError

from authcore.shared.config import AppConfig, SecurityConfig


def test_production_rejects_placeholder_secret() -> None:
    with pytest.raises(ValidationError):
        AppConfig(app_env="production", jwt_secret="dev")


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(app_env="production", jwt_secret="k3Y-3xAmple-9f1c2d7e8a6b5c4d3e2f1a0b")

    assert config.is_production()


def test_unsupported_hash_method_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppConfig(password_hash_method="md5")


def test_allowed_origins_parsed_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    assert SecurityConfig().allowed_origins == ["https://a.example", "https://b.example"]


def test_signing_secret_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-environment")

    assert AppConfig().jwt_secret == "from-environment"
