# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from authcore.domain.accounts.repositories import Clock


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC)
