# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from authcore.application.services.authentication_flow import AuthenticationFlow
from authcore.application.services.password_hashing import WerkzeugPasswordHasher
from authcore.application.services.token_issuing import JwtTokenIssuer
from authcore.application.use_cases.accounts.login_account import LoginAccountUseCase
from authcore.application.use_cases.accounts.register_account import RegisterAccountUseCase
from authcore.infrastructure.clock import SystemClock
from authcore.infrastructure.db import build_engine, build_session_factory
from authcore.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from authcore.interfaces.http.controllers.auth_controller import AuthController
from authcore.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self._config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.password_hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self._config.jwt_secret)

    @cached_property
    def clock(self) -> SystemClock:
        return SystemClock()

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
            clock=self.clock,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
            clock=self.clock,
        )

    @cached_property
    def authentication_flow(self) -> AuthenticationFlow:
        return AuthenticationFlow(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            flow=self.authentication_flow,
            expose_error_detail=self._config.expose_error_detail,
        )
