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
"""CORS response header composition."""

from __future__ import annotations

from corsfly.http.cors.matcher import CorsDecision, RequestContext
from corsfly.http.cors.policy import PolicyConfig

ORIGIN = "Origin"
HOST = "Host"
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"

ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"


def compose(decision: CorsDecision) -> dict[str, str]:
    """Return the CORS headers for *decision*; empty when it did not match."""
    if not decision.matched or decision.allow_origin_value is None:
        return {}

    headers = {ACCESS_CONTROL_ALLOW_ORIGIN: decision.allow_origin_value}
    if decision.allow_credentials:
        headers[ACCESS_CONTROL_ALLOW_CREDENTIALS] = "true"
    if decision.allow_methods:
        headers[ACCESS_CONTROL_ALLOW_METHODS] = ", ".join(decision.allow_methods)
    return headers


def compose_preflight(decision: CorsDecision, config: PolicyConfig) -> dict[str, str]:
    """Headers for a preflight response: :func:`compose` plus allow-headers and max-age."""
    headers = compose(decision)
    if not headers:
        return headers

    if config.allowed_headers:
        headers[ACCESS_CONTROL_ALLOW_HEADERS] = ", ".join(config.allowed_headers)
    headers[ACCESS_CONTROL_MAX_AGE] = str(config.max_age)
    return headers


def is_preflight(req: RequestContext) -> bool:
    return req.method.upper() == "OPTIONS" and req.origin is not None and req.request_method is not None
