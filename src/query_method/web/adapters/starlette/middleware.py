# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""QueryMethodMiddleware: standalone pure ASGI method override middleware."""

from __future__ import annotations

from starlette.types import ASGIApp, Receive, Scope, Send

from query_method.logging.port import EventSink
from query_method.logging.structlog_adapter import StructlogEventSink
from query_method.override.config import QueryMethodConfig
from query_method.override.evaluator import evaluate
from query_method.override.types import Rejected, Rewritten
from query_method.web.adapters.starlette.scope import (
    commit_rewrite,
    descriptor_from_scope,
    rejection_response,
)


class QueryMethodMiddleware:
    """Reroute ``POST`` requests to the method named in a query parameter.

    Use this when the application has no filter chain. Unlike
    :class:`WebFilterChainMiddleware` it does not buffer responses, so
    streaming endpoints keep streaming.

    Usage:
        app = Starlette(
            routes=routes,
            middleware=[Middleware(QueryMethodMiddleware, config=QueryMethodConfig(strict_mode=True))],
        )
    """

    def __init__(
        self,
        app: ASGIApp,
        config: QueryMethodConfig | None = None,
        events: EventSink | None = None,
    ) -> None:
        self.app = app
        self.config = config or QueryMethodConfig()
        self.events = events if events is not None else StructlogEventSink()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        outcome = evaluate(descriptor_from_scope(scope), self.config, self.events)
        if isinstance(outcome, Rejected):
            await rejection_response(outcome)(scope, receive, send)
            return
        if isinstance(outcome, Rewritten):
            commit_rewrite(scope, outcome)

        await self.app(scope, receive, send)
