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
"""Translate between the ASGI scope and the framework-agnostic override types."""

from __future__ import annotations

from starlette.responses import PlainTextResponse
from starlette.types import Scope

from query_method.override.types import Rejected, RequestDescriptor, Rewritten

ORIGINAL_METHOD_KEY = "original_method"


def descriptor_from_scope(scope: Scope) -> RequestDescriptor:
    return RequestDescriptor(
        method=scope["method"],
        path=scope.get("path", ""),
        query_string=scope.get("query_string", b"").decode("utf-8", "surrogateescape"),
    )


def commit_rewrite(scope: Scope, outcome: Rewritten) -> None:
    """Apply a rewrite to *scope* in place.

    The method it replaced is kept in ``scope["state"]["original_method"]``
    and is reachable as ``request.state.original_method``.
    """
    scope.setdefault("state", {})[ORIGINAL_METHOD_KEY] = scope["method"]
    scope["method"] = outcome.method
    scope["query_string"] = outcome.query_string.encode("utf-8", "surrogateescape")


def rejection_response(outcome: Rejected) -> PlainTextResponse:
    return PlainTextResponse(outcome.message, status_code=outcome.status_code)
