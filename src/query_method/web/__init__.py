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
"""query_method web layer: filter port and Starlette adapter."""

from query_method.web.adapters.starlette import (
    QueryMethodFilter,
    QueryMethodMiddleware,
    WebFilterChainMiddleware,
)
from query_method.web.filters import OncePerRequestFilter
from query_method.web.ordering import HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE, get_order, order
from query_method.web.ports.filter import WebFilter

__all__ = [
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "OncePerRequestFilter",
    "QueryMethodFilter",
    "QueryMethodMiddleware",
    "WebFilter",
    "WebFilterChainMiddleware",
    "get_order",
    "order",
]
