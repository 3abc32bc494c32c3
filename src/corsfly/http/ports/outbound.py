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
"""Outbound port: the transport's write sink."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corsfly.http.response import OutgoingResponse


@runtime_checkable
class ResponseWriter(Protocol):
    """Write capability of a connection.

    The channel calls ``write`` exactly once per response and does not
    observe whether the write succeeded.
    """

    def write(self, response: OutgoingResponse) -> None:
        """Hand the assembled response to the connection."""
        ...
