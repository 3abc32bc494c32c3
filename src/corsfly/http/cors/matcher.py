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
"""Origin matching — decides whether a request's Origin is authorized."""

from __future__ import annotations

from dataclasses import dataclass

from corsfly.http.cors.policy import ANY_ORIGIN, OriginKind, PolicyConfig

_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class RequestContext:
    """Read-only view of the request headers CORS cares about."""

    origin: str | None = None
    host: str | None = None
    method: str = "GET"
    request_method: str | None = None


@dataclass(frozen=True)
class CorsDecision:
    """Outcome of matching one request against the policy.

    ``allow_origin_value`` is the exact literal to echo back; it is only the
    wildcard when the policy itself allows any origin.
    """

    matched: bool = False
    allow_origin_value: str | None = None
    allow_credentials: bool = False
    allow_methods: tuple[str, ...] | None = None


NO_MATCH = CorsDecision()


def _strip_scheme(origin: str) -> str:
    for scheme in _SCHEMES:
        if origin.startswith(scheme):
            return origin[len(scheme):]
    return origin


def _is_same_host(origin: str, host: str | None) -> bool:
    return host is not None and _strip_scheme(origin) == host


def decide(config: PolicyConfig, req: RequestContext) -> CorsDecision:
    """Match *req* against *config*.

    With no allow-origin configured, a request whose Origin (minus its
    scheme) equals its Host is treated as same-origin and matched. The
    received Origin is echoed verbatim, never normalized.
    """
    if not config.enabled or req.origin is None:
        return NO_MATCH

    origin = config.allowed_origin
    if origin.kind is OriginKind.ANY:
        # Wildcard origin must never be combined with credentials.
        return CorsDecision(
            matched=True,
            allow_origin_value=ANY_ORIGIN,
            allow_credentials=False,
            allow_methods=config.allowed_methods or None,
        )

    if origin.kind is OriginKind.EXACT:
        matched = req.origin == origin.value
    else:
        matched = _is_same_host(req.origin, req.host)

    if not matched:
        return NO_MATCH

    return CorsDecision(
        matched=True,
        allow_origin_value=req.origin,
        allow_credentials=config.allow_credentials,
        allow_methods=config.allowed_methods or None,
    )
