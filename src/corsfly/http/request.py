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
"""Inbound request view handed over by the transport."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from starlette.datastructures import Headers

from corsfly.http.cors.headers import ACCESS_CONTROL_REQUEST_METHOD, HOST, ORIGIN
from corsfly.http.cors.matcher import RequestContext


class HttpRequest:
    """An already-parsed HTTP request: method, URI and case-insensitive headers.

    Header values are stored as their UTF-8 wire bytes and read back the ASGI
    way (latin-1), so any value is accepted and an echoed value goes back out
    byte-for-byte as it came in.
    """

    def __init__(
        self,
        method: str = "GET",
        uri: str = "/",
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self.method = method.upper()
        self.uri = uri
        items = headers.items() if isinstance(headers, Mapping) else (headers or [])
        self.headers = Headers(
            raw=[(name.lower().encode("utf-8"), value.encode("utf-8")) for name, value in items]
        )

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    def to_context(self) -> RequestContext:
        return RequestContext(
            origin=self.headers.get(ORIGIN),
            host=self.headers.get(HOST),
            method=self.method,
            request_method=self.headers.get(ACCESS_CONTROL_REQUEST_METHOD),
        )

    def __repr__(self) -> str:
        return f"HttpRequest(method={self.method!r}, uri={self.uri!r})"
