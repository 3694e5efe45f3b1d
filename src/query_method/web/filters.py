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
"""OncePerRequestFilter: WebFilter base class with URL-pattern matching."""

from __future__ import annotations

import abc
from fnmatch import fnmatch
from typing import Any

from query_method.web.ports.filter import CallNext


class OncePerRequestFilter(abc.ABC):
    """Base class for :class:`WebFilter` implementations.

    Paths are matched against the ASGI ``scope["path"]`` (percent-decoded,
    without the query string), so no URL object is built per request.

    Attributes:
        url_patterns: Glob patterns the filter applies to. Empty means every path.
        exclude_patterns: Glob patterns skipped even when ``url_patterns`` match.
    """

    url_patterns: list[str] = []
    exclude_patterns: list[str] = []

    def should_not_filter(self, request: Any) -> bool:
        path: str = request.scope.get("path", "")

        if self.url_patterns and not any(fnmatch(path, p) for p in self.url_patterns):
            return True

        return bool(self.exclude_patterns and any(fnmatch(path, p) for p in self.exclude_patterns))

    @abc.abstractmethod
    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Run the filter. Call ``await call_next(request)`` to continue the chain."""
        ...
