# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authcore.application.services.authentication_flow import (
    AuthenticationFlow,
    AuthOutcome,
    OutcomeKind,
)
from authcore.interfaces.http.dto.auth import (
    AuthErrorDTO,
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from authcore.shared.errors.validation import format_pydantic_errors
from authcore.shared.logging import logger

_FAILURE_STATUS: dict[OutcomeKind, HTTPStatus] = {
    OutcomeKind.VALIDATION_ERROR: HTTPStatus.BAD_REQUEST,
    OutcomeKind.CONFLICT_ERROR: HTTPStatus.BAD_REQUEST,
    OutcomeKind.AUTHENTICATION_ERROR: HTTPStatus.BAD_REQUEST,
    OutcomeKind.CONFIGURATION_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    OutcomeKind.DECODE_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    OutcomeKind.UNEXPECTED_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


class AuthController:
    def __init__(self, *, flow: AuthenticationFlow, expose_error_detail: bool = False) -> None:
        self._flow = flow
        self._expose_error_detail = expose_error_detail

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            logger.info(f"auth.register: invalid body {format_pydantic_errors(exc)['fields']}")
            return self._respond("register", self._flow.invalid_input(), HTTPStatus.CREATED)

        outcome = self._flow.register(dto.first_name, dto.email, dto.password)
        return self._respond("register", outcome, HTTPStatus.CREATED)

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            logger.info(f"auth.login: invalid body {format_pydantic_errors(exc)['fields']}")
            return self._respond("login", self._flow.invalid_input(), HTTPStatus.OK)

        outcome = self._flow.login(dto.email, dto.password)
        return self._respond("login", outcome, HTTPStatus.OK)

    def _respond(
        self, operation: str, outcome: AuthOutcome, success_status: HTTPStatus
    ) -> tuple[Response, int]:
        if outcome.ok:
            payload = AuthSuccessDTO.model_validate(
                {"token": outcome.token, "first_name": outcome.first_name}
            )
            return jsonify(payload.model_dump(by_alias=True)), success_status

        status = _FAILURE_STATUS[outcome.kind]
        error = AuthErrorDTO(
            message=outcome.message or "",
            error=outcome.detail if self._expose_error_detail else None,
        )
        if outcome.kind.is_server_error:
            logger.warning(f"auth.{operation}: {outcome.kind.value} -> {int(status)}")
        return jsonify(error.model_dump(exclude_none=True)), status

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
