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
"""Response assembly — merges CORS headers into the application's response."""

from __future__ import annotations

from collections.abc import Mapping

from starlette.datastructures import MutableHeaders

from corsfly.http.response import ApplicationResponse, OutgoingResponse

CONTENT_TYPE = "Content-Type"
CONTENT_LENGTH = "Content-Length"


def assemble(cors_headers: Mapping[str, str], response: ApplicationResponse) -> OutgoingResponse:
    """Build the outgoing response.

    Order of writes: CORS headers, then the application's custom headers
    (replacing any header of the same name), then Content-Type and
    Content-Length. Content-Length is always the length of the body.
    """
    headers = MutableHeaders()
    for name, value in cors_headers.items():
        headers[name] = value

    for name, values in response.headers.items():
        if not values:
            continue
        headers[name] = values[0]
        for value in values[1:]:
            headers.append(name, value)

    body = bytes(response.content())
    headers[CONTENT_TYPE] = response.content_type()
    headers[CONTENT_LENGTH] = str(len(body))

    return OutgoingResponse(status=response.status, body=body, headers=headers)
