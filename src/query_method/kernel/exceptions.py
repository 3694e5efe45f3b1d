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
"""Exception hierarchy for query_method.

The rejection exceptions never escape the override filter: the evaluator
builds them and attaches them to a ``Rejected`` outcome so that adapters can
render the response and callers can inspect which rule fired.
"""

from __future__ import annotations


class QueryMethodException(Exception):
    """Base exception for all query_method errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "BAD_METHOD_TOKEN").
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(QueryMethodException):
    """Invalid or unreadable configuration."""


class RequestRejectedException(QueryMethodException):
    """Client input the override filter refuses to forward."""

    status_code: int = 400


class BadMethodTokenException(RequestRejectedException):
    """The override parameter's value is not a valid HTTP method token."""

    def __init__(self, value: str, context: dict | None = None) -> None:
        super().__init__(
            f"Method query parameter value {value} is bad",
            code="BAD_METHOD_TOKEN",
            context=context,
        )
        self.value = value


class NonReroutableMethodException(RequestRejectedException):
    """Override parameter present on a non-POST request in strict mode."""

    def __init__(self, method: str, context: dict | None = None) -> None:
        super().__init__(
            f"Method {method} can not be rerouted with a query parameter",
            code="NON_REROUTABLE_METHOD",
            context=context,
        )
        self.method = method
