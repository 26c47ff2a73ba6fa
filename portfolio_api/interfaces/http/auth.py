# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import g

from portfolio_api.application.use_cases.accounts.verify_token import VerifyTokenUseCase
from portfolio_api.domain.accounts.exceptions import InvalidTokenError, MissingTokenError
from portfolio_api.interfaces.http.context import current_context
from portfolio_api.shared.logging import logger


class AuthGuard:
    """Wraps a view so it only runs for a verified bearer token.

    The wrapped view receives the populated ``RequestContext`` as ``ctx``.
    """

    def __init__(self, verify_use_case: VerifyTokenUseCase) -> None:
        self._verify = verify_use_case

    def __call__(self, f: Callable) -> Callable:
        @wraps(f)
        def inner(*a, **kw):
            ctx = current_context()
            try:
                ctx.identity = self._verify.execute(ctx.authorization)
            except MissingTokenError:
                logger.warning(
                    f"No Authorization header on {ctx.method} {ctx.path} from {ctx.remote_addr}"
                )
                raise
            except InvalidTokenError:
                logger.warning(f"Auth failed (token invalid/expired) on {ctx.method} {ctx.path}")
                raise

            g.identity = ctx.identity
            logger.debug(f"Auth OK: account={ctx.account_id} {ctx.method} {ctx.path}")
            kw["ctx"] = ctx
            return f(*a, **kw)

        return inner
