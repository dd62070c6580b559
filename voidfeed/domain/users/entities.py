# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def normalise_username(username: str | None) -> str:
    """Canonical form used both when storing and when looking up a username."""
    return (username or "").strip()


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    created_at: datetime
    email: str | None = None


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity and validity window decoded from a verified session token."""

    user_id: str
    username: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
