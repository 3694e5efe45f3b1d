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
"""Framework-agnostic method override: configuration, outcomes and the evaluator."""

from query_method.override.config import DEFAULT_PARAMETER_NAME, QueryMethodConfig
from query_method.override.evaluator import evaluate
from query_method.override.methods import is_method_token
from query_method.override.types import (
    Outcome,
    Rejected,
    RequestDescriptor,
    Rewritten,
    Unchanged,
)

__all__ = [
    "DEFAULT_PARAMETER_NAME",
    "Outcome",
    "QueryMethodConfig",
    "Rejected",
    "RequestDescriptor",
    "Rewritten",
    "Unchanged",
    "evaluate",
    "is_method_token",
]
