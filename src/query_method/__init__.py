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
"""query_method: reroute POST requests to other HTTP methods with a query parameter.

HTML forms can only submit ``GET`` and ``POST``. With this filter in front of
the router, ``<form method="post" action="/items/1?_method=DELETE">`` reaches
the ``DELETE /items/1`` handler, and the ``_method`` parameter is stripped so
the handler never sees it.
"""

from query_method.core.config import Config
from query_method.logging import EventSink, NoOpEventSink, StdlibEventSink, StructlogEventSink
from query_method.override import (
    QueryMethodConfig,
    Rejected,
    RequestDescriptor,
    Rewritten,
    Unchanged,
    evaluate,
)
from query_method.web import QueryMethodFilter, QueryMethodMiddleware, WebFilterChainMiddleware

__version__ = "1.0.1"

__all__ = [
    "Config",
    "EventSink",
    "NoOpEventSink",
    "QueryMethodConfig",
    "QueryMethodFilter",
    "QueryMethodMiddleware",
    "Rejected",
    "RequestDescriptor",
    "Rewritten",
    "StdlibEventSink",
    "StructlogEventSink",
    "Unchanged",
    "WebFilterChainMiddleware",
    "evaluate",
]
