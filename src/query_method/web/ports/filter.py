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
"""Filter contract shared by the method override filter and its chain.

A request is anything exposing the ASGI ``scope`` mapping; the chain passes
Starlette requests, tests may pass mocks.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

CallNext = Callable[[Any], Awaitable[Any]]


@runtime_checkable
class WebFilter(Protocol):
    """Rewrites a request before dispatch, or answers it instead.

    ``do_filter`` either returns ``await call_next(request)`` (possibly with
    a rewritten request) or a response of its own, in which case nothing
    downstream runs. ``should_not_filter`` lets the chain skip the filter
    for requests outside its URL space.
    """

    async def do_filter(self, request: Any, call_next: CallNext) -> Any: ...

    def should_not_filter(self, request: Any) -> bool: ...
