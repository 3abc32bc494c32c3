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
"""HttpChannel — runs the CORS pipeline for one request and writes the result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from corsfly.http.assembler import assemble
from corsfly.http.cors.headers import compose, compose_preflight, is_preflight
from corsfly.http.cors.matcher import decide
from corsfly.http.ports.outbound import ResponseWriter
from corsfly.http.request import HttpRequest
from corsfly.http.response import ApplicationResponse, BytesResponse

if TYPE_CHECKING:
    from corsfly.http.transport import HttpServerTransport

logger = logging.getLogger(__name__)

FORBIDDEN = 403
OK = 200


class HttpChannel:
    """Per-request channel.

    Holds no state beyond the request and the writer; the policy is read from
    the owning transport.
    """

    def __init__(self, transport: HttpServerTransport, request: HttpRequest, writer: ResponseWriter) -> None:
        self._transport = transport
        self._request = request
        self._writer = writer
        self._context = request.to_context()

    @property
    def request(self) -> HttpRequest:
        return self._request

    @property
    def is_preflight(self) -> bool:
        return self._transport.policy.enabled and is_preflight(self._context)

    def send_response(self, response: ApplicationResponse) -> None:
        """Assemble *response* with the request's CORS headers and write it."""
        decision = decide(self._transport.policy, self._context)
        cors_headers = compose(decision)
        logger.debug(
            "cors decision for %s %s: origin=%r matched=%s",
            self._request.method,
            self._request.uri,
            self._context.origin,
            decision.matched,
        )
        self._writer.write(assemble(cors_headers, response))

    def send_preflight(self) -> None:
        """Answer a preflight request: 200 with CORS headers, or 403 with none."""
        policy = self._transport.policy
        decision = decide(policy, self._context)
        if not decision.matched:
            logger.info("rejected preflight from origin %r", self._context.origin)
            self._writer.write(assemble({}, BytesResponse(status=FORBIDDEN)))
            return
        self._writer.write(assemble(compose_preflight(decision, policy), BytesResponse(status=OK)))
