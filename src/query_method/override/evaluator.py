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
"""The method override decision procedure.

``evaluate()`` is a pure function of the request descriptor and the
configuration: it never touches the host's request object. Adapters in
:mod:`query_method.web` commit the returned outcome to their own request
representation.
"""

from __future__ import annotations

from query_method.kernel.exceptions import BadMethodTokenException, NonReroutableMethodException
from query_method.logging.noop import NoOpEventSink
from query_method.logging.port import EventSink
from query_method.override.config import QueryMethodConfig
from query_method.override.methods import POST, is_method_token
from query_method.override.types import (
    UNCHANGED,
    Outcome,
    Rejected,
    RequestDescriptor,
    Rewritten,
    strip_parameter,
)

_NO_EVENTS = NoOpEventSink()


def evaluate(
    request: RequestDescriptor,
    config: QueryMethodConfig,
    events: EventSink | None = None,
) -> Outcome:
    """Decide whether *request* is rerouted, forwarded as-is or rejected.

    Only ``POST`` requests are rerouted. A ``GET`` carrying the override is
    left alone (or rejected in strict mode) so that a plain link can never
    trigger a destructive verb.
    """
    if events is None:
        events = _NO_EVENTS
    name = config.parameter_name
    pairs = request.query_pairs()

    value = next((v for k, v in pairs if k == name), None)
    if value is None:
        return UNCHANGED

    context = {
        "parameter_name": name,
        "parameter_value": value,
        "path": request.path,
        "original_method": request.method,
    }

    if request.method != POST:
        events.warning("non_post_method_query_parameter", **context)
        if config.strict_mode:
            return Rejected(NonReroutableMethodException(request.method, context=context))
        return UNCHANGED

    if not is_method_token(value):
        events.warning("bad_method_query_parameter", **context)
        return Rejected(BadMethodTokenException(value, context=context))

    events.debug(
        "request_method_rerouted",
        path=request.path,
        original_method=request.method,
        new_method=value,
        parameter_value=value,
    )
    return Rewritten(
        method=value,
        path=request.path,
        query_string=strip_parameter(request.query_string, name),
    )
