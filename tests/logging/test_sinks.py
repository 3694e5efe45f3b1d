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
"""Tests for the EventSink port and its adapters."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from query_method.core.config import Config
from query_method.logging import (
    EventSink,
    NoOpEventSink,
    StdlibEventSink,
    StructlogEventSink,
    configure_logging,
)


class TestEventSinkProtocol:
    @pytest.mark.parametrize("sink_cls", [NoOpEventSink, StdlibEventSink, StructlogEventSink])
    def test_adapters_conform(self, sink_cls):
        assert isinstance(sink_cls(), EventSink)

    def test_non_conforming_class_is_not_instance(self):
        class DebugOnly:
            def debug(self, event: str, **fields: Any) -> None:
                pass

        assert not isinstance(DebugOnly(), EventSink)


class TestNoOpEventSink:
    def test_discards_events(self):
        sink = NoOpEventSink()
        assert sink.debug("anything", a=1) is None
        assert sink.warning("anything", a=1) is None


class TestStdlibEventSink:
    def test_warning_is_formatted(self, caplog: pytest.LogCaptureFixture):
        sink = StdlibEventSink("query_method.test")
        with caplog.at_level(logging.WARNING, logger="query_method.test"):
            sink.warning("bad_method_query_parameter", parameter_value="A:B", path="/")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "bad_method_query_parameter | parameter_value=A:B path=/"
        assert record.event_fields == {"parameter_value": "A:B", "path": "/"}

    def test_debug_respects_level(self, caplog: pytest.LogCaptureFixture):
        sink = StdlibEventSink(logging.getLogger("query_method.test"))
        with caplog.at_level(logging.INFO, logger="query_method.test"):
            sink.debug("request_method_rerouted", new_method="PUT")
        assert caplog.records == []

        with caplog.at_level(logging.DEBUG, logger="query_method.test"):
            sink.debug("request_method_rerouted")
        assert caplog.records[0].getMessage() == "request_method_rerouted"


class TestStructlogEventSink:
    def test_forwards_events(self):
        with capture_logs() as logs:
            sink = StructlogEventSink()
            sink.debug("request_method_rerouted", new_method="PUT")
            sink.warning("non_post_method_query_parameter", original_method="GET")

        assert logs == [
            {"event": "request_method_rerouted", "new_method": "PUT", "log_level": "debug"},
            {"event": "non_post_method_query_parameter", "original_method": "GET", "log_level": "warning"},
        ]

    def test_accepts_injected_logger(self):
        calls: list[tuple[str, str, dict[str, Any]]] = []

        class FakeLogger:
            def debug(self, event: str, **kw: Any) -> None:
                calls.append(("debug", event, kw))

            def warning(self, event: str, **kw: Any) -> None:
                calls.append(("warning", event, kw))

        StructlogEventSink(FakeLogger()).warning("x", a=1)
        assert calls == [("warning", "x", {"a": 1})]


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _reset(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("query_method.web").setLevel(logging.NOTSET)

    def test_root_level(self):
        configure_logging(Config({"query_method": {"logging": {"level": {"root": "DEBUG"}}}}))
        assert logging.getLogger().level == logging.DEBUG

    def test_module_levels(self):
        config = Config({"query_method": {"logging": {"level": {"root": "INFO", "query_method.web": "ERROR"}}}})
        configure_logging(config)
        assert logging.getLogger("query_method.web").level == logging.ERROR

    def test_json_format(self):
        configure_logging(Config({"query_method": {"logging": {"format": "json"}}}))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_format_by_default(self):
        configure_logging(Config({}))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
