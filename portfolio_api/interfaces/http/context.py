# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transport-neutral view of the current request."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from flask import request

from portfolio_api.domain.accounts.entities import Identity


@dataclass(slots=True)
class RequestContext:
    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    remote_addr: str | None = None
    identity: Identity | None = None

    @property
    def authorization(self) -> str | None:
        return self.headers.get("Authorization")

    @property
    def account_id(self) -> str:
        if self.identity is None:
            raise RuntimeError("request is not authenticated")
        return self.identity.account_id


def current_context() -> RequestContext:
    body = request.get_json(silent=True)
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return RequestContext(
        method=request.method,
        path=request.path,
        params=dict(request.view_args or {}),
        body=body if isinstance(body, dict) else {},
        headers=request.headers,
        remote_addr=forwarded or request.remote_addr,
    )
