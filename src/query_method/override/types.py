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
"""Request descriptor and evaluation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote_plus

from query_method.kernel.exceptions import RequestRejectedException

QueryPairs = list[tuple[str, str]]


def _text(value: str) -> str:
    # undecodable bytes carried as surrogates become U+FFFD
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def segment_key(segment: str) -> str:
    return _text(unquote_plus(segment.partition("=")[0]))


def parse_query(query_string: str) -> QueryPairs:
    """Split a raw query string into ordered, percent-decoded pairs.

    Duplicates and blank values are kept; empty segments are skipped.
    """
    pairs: QueryPairs = []
    for segment in query_string.split("&"):
        if segment:
            key, _, value = segment.partition("=")
            pairs.append((_text(unquote_plus(key)), _text(unquote_plus(value))))
    return pairs


def strip_parameter(query_string: str, name: str) -> str:
    """Remove every segment keyed *name*, leaving the others byte for byte."""
    return "&".join(s for s in query_string.split("&") if segment_key(s) != name)


@dataclass(frozen=True)
class RequestDescriptor:
    """The parts of an in-flight request the override filter looks at."""

    method: str
    path: str
    query_string: str = ""

    def query_pairs(self) -> QueryPairs:
        return parse_query(self.query_string)


@dataclass(frozen=True)
class Unchanged:
    """Forward the request exactly as it arrived."""


@dataclass(frozen=True)
class Rewritten:
    """Forward the request under a new method with the override stripped."""

    method: str
    path: str
    query_string: str


@dataclass(frozen=True)
class Rejected:
    """Terminate the request with an error response."""

    reason: RequestRejectedException

    @property
    def status_code(self) -> int:
        return self.reason.status_code

    @property
    def message(self) -> str:
        return self.reason.message


Outcome = Unchanged | Rewritten | Rejected

UNCHANGED = Unchanged()
