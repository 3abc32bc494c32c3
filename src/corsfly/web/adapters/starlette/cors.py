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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

import logging
from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from corsfly.config.properties.cors import CorsProperties
from corsfly.core.config import Config
from corsfly.http.cors.headers import (
    ACCESS_CONTROL_REQUEST_METHOD,
    HOST,
    ORIGIN,
    compose,
    compose_preflight,
    is_preflight,
)
from corsfly.http.cors.matcher import RequestContext, decide
from corsfly.http.cors.policy import OriginKind, PolicyConfig

logger = logging.getLogger(__name__)


class CorsMiddleware:
    """Applies a :class:`PolicyConfig` to every HTTP response.

    Preflight requests are answered here without reaching the application.
    For other requests the composed CORS headers are added to the response
    start message unless the application already set a header of that name.
    Unless the policy is the wildcard, responses to requests with an Origin
    also get ``Vary: Origin``.
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: PolicyConfig | None = None,
        config: Config | None = None,
    ) -> None:
        self.app = app
        if policy is None:
            policy = PolicyConfig.from_properties((config or Config()).bind(CorsProperties))
        self._policy = policy

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self._policy.enabled:
            await self.app(scope, receive, send)
            return

        request_headers = Headers(scope=scope)
        context = RequestContext(
            origin=request_headers.get(ORIGIN),
            host=request_headers.get(HOST),
            method=scope["method"],
            request_method=request_headers.get(ACCESS_CONTROL_REQUEST_METHOD),
        )
        decision = decide(self._policy, context)
        # Any policy other than the wildcard answers differently per Origin.
        vary_on_origin = context.origin is not None and self._policy.allowed_origin.kind is not OriginKind.ANY

        if is_preflight(context):
            if decision.matched:
                response = Response(status_code=200, headers=compose_preflight(decision, self._policy))
            else:
                logger.info("rejected preflight from origin %r", context.origin)
                response = Response(status_code=403)
            if vary_on_origin:
                response.headers.add_vary_header(ORIGIN)
            await response(scope, receive, send)
            return

        cors_headers = compose(decision)
        if not cors_headers and not vary_on_origin:
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in cors_headers.items():
                    if name not in headers:
                        headers[name] = value
                if vary_on_origin:
                    headers.add_vary_header(ORIGIN)
            await send(message)

        await self.app(scope, receive, send_with_cors)
