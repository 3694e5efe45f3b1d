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
"""StructlogEventSink: default EventSink, plus structlog setup from Config."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from query_method.core.config import Config

LOGGER_NAME = "query_method"


class StructlogEventSink:
    """Forwards events to a structlog logger as ``logger.<level>(event, **fields)``."""

    __slots__ = ("_logger",)

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(LOGGER_NAME)

    def debug(self, event: str, **fields: Any) -> None:
        self._logger.debug(event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._logger.warning(event, **fields)


def configure_logging(config: Config) -> None:
    """Configure structlog and stdlib levels from ``query_method.logging``.

    Reads ``query_method.logging.level.root`` (default ``INFO``), per-module
    levels under the same section, and ``query_method.logging.format``
    (``console`` or ``json``).
    """
    level_section = dict(config.get_section("query_method.logging.level"))
    root_level = str(level_section.pop("root", "INFO")).upper()
    fmt = str(config.get("query_method.logging.format", "console")).lower()

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_level(root_level),
        force=True,
    )
    for module, level in level_section.items():
        logging.getLogger(module).setLevel(_level(str(level)))


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
