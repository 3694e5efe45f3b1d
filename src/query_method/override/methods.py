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
"""HTTP method token grammar (RFC 9110, section 9.1: ``method = token``)."""

from __future__ import annotations

import re

POST = "POST"

# tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." /
#         "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA
METHOD_TOKEN_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def is_method_token(value: str) -> bool:
    """Return ``True`` if *value* is a syntactically valid method name.

    Well-formed but unknown verbs such as ``LIST`` are accepted; values with
    delimiters (``LIST:ITEMS``), whitespace or nothing at all are not.
    """
    return METHOD_TOKEN_PATTERN.fullmatch(value) is not None
