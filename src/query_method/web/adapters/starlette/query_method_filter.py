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
"""Method override filter: reroutes POST requests using a query parameter."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request

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
from query_method.web.filters import OncePerRequestFilter
from query_method.web.ordering import HIGHEST_PRECEDENCE, order
from query_method.web.ports.filter import CallNext


@order(HIGHEST_PRECEDENCE + 50)
class QueryMethodFilter(OncePerRequestFilter):
    """Lets HTML forms reach PUT/DELETE/... handlers via ``?_method=PUT``.

    Runs ahead of the other filters so that everything downstream, routing
    included, sees the rewritten method.
    """

    def __init__(
        self,
        config: QueryMethodConfig | None = None,
        events: EventSink | None = None,
        url_patterns: list[str] | None = None,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        self.config = config or QueryMethodConfig()
        self.events = events if events is not None else StructlogEventSink()
        if url_patterns is not None:
            self.url_patterns = url_patterns
        if exclude_patterns is not None:
            self.exclude_patterns = exclude_patterns

    async def do_filter(self, request: Request, call_next: CallNext) -> Any:
        outcome = evaluate(descriptor_from_scope(request.scope), self.config, self.events)

        if isinstance(outcome, Rejected):
            return rejection_response(outcome)

        if isinstance(outcome, Rewritten):
            commit_rewrite(request.scope, outcome)
            # the old Request may have cached its URL and query params
            request = Request(request.scope, request.receive)

        return await call_next(request)
