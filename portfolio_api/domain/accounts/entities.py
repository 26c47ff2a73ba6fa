# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: str
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class AccessToken:

    account_id: str
    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """The account a verified bearer token speaks for."""

    account_id: str
