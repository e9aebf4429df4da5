# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    SERVER_ERROR_MESSAGE,
    AppError,
    DomainError,
    InfrastructureError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "SERVER_ERROR_MESSAGE",
    "AppError",
    "DomainError",
    "InfrastructureError",
    "handle_app_error",
    "register_error_handler",
]
