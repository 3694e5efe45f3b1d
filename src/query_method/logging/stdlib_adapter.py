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
"""StdlibEventSink: EventSink backed by the standard ``logging`` module."""

from __future__ import annotations

import logging
from typing import Any


class StdlibEventSink:
    """Renders events as ``event | key=value ...`` on a stdlib logger.

    The fields are also attached to the record as ``event_fields`` so that
    handlers and filters can read them without parsing the message.
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | str = "query_method") -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    @staticmethod
    def _format(event: str, fields: dict[str, Any]) -> str:
        if fields:
            pairs = " ".join(f"{k}={v}" for k, v in fields.items())
            return f"{event} | {pairs}"
        return event

    def debug(self, event: str, **fields: Any) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self._format(event, fields), extra={"event_fields": fields})

    def warning(self, event: str, **fields: Any) -> None:
        self._logger.warning(self._format(event, fields), extra={"event_fields": fields})
