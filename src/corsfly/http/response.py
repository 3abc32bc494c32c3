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
"""Application and outgoing response types."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field

from starlette.datastructures import MutableHeaders


class ApplicationResponse(abc.ABC):
    """Response produced by the application layer.

    Subclasses provide status, content type and body. Custom headers may be
    added before the response is sent; a name added twice keeps both values.
    """

    def __init__(self) -> None:
        self._headers: dict[str, list[str]] = {}

    @property
    @abc.abstractmethod
    def status(self) -> int: ...

    @abc.abstractmethod
    def content_type(self) -> str: ...

    @abc.abstractmethod
    def content(self) -> bytes: ...

    def add_header(self, name: str, value: str) -> None:
        """Add a header value; names match case-insensitively, first spelling is kept."""
        for existing in self._headers:
            if existing.lower() == name.lower():
                name = existing
                break
        self._headers.setdefault(name, []).append(value)

    @property
    def headers(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self._headers.items()}


class BytesResponse(ApplicationResponse):
    """Plain in-memory response."""

    def __init__(
        self,
        content: bytes | str = b"",
        content_type: str = "text/plain; charset=UTF-8",
        status: int = 200,
    ) -> None:
        super().__init__()
        self._content = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self._content_type = content_type
        self._status = status

    @property
    def status(self) -> int:
        return self._status

    def content_type(self) -> str:
        return self._content_type

    def content(self) -> bytes:
        return self._content


@dataclass
class OutgoingResponse:
    """Final response as handed to the transport for writing."""

    status: int
    body: bytes = b""
    headers: MutableHeaders = field(default_factory=MutableHeaders)
