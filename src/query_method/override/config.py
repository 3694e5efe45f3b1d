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
"""Override filter configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from query_method.core.config import Config, config_properties
from query_method.kernel.exceptions import ConfigurationException

DEFAULT_PARAMETER_NAME = "_method"


@config_properties(prefix="query_method")
@dataclass(frozen=True)
class QueryMethodConfig:
    """Settings shared read-only by every request evaluation.

    Attributes:
        parameter_name: Query key that carries the override. Change it if the
            application already uses ``_method`` for something else.
        strict_mode: Reject (400) non-POST requests that carry the override
            parameter instead of letting them through unchanged.
    """

    parameter_name: str = DEFAULT_PARAMETER_NAME
    strict_mode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.parameter_name, str) or not self.parameter_name:
            raise ConfigurationException(
                "parameter_name must be a non-empty string",
                code="CONFIG_BAD_VALUE",
                context={"key": "query_method.parameter_name", "value": self.parameter_name},
            )

    @classmethod
    def from_config(cls, config: Config) -> QueryMethodConfig:
        """Bind from the ``query_method`` section (and its env overrides)."""
        return config.bind(cls)

    def with_parameter_name(self, name: str) -> QueryMethodConfig:
        return dataclasses.replace(self, parameter_name=name)

    def enable_strict_mode(self) -> QueryMethodConfig:
        return dataclasses.replace(self, strict_mode=True)

    def disable_strict_mode(self) -> QueryMethodConfig:
        return dataclasses.replace(self, strict_mode=False)
