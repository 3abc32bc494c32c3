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
"""CORS policy decision engine and header composer."""

from corsfly.http.cors.headers import (
    ACCESS_CONTROL_ALLOW_CREDENTIALS,
    ACCESS_CONTROL_ALLOW_HEADERS,
    ACCESS_CONTROL_ALLOW_METHODS,
    ACCESS_CONTROL_ALLOW_ORIGIN,
    ACCESS_CONTROL_MAX_AGE,
    ACCESS_CONTROL_REQUEST_METHOD,
    compose,
    compose_preflight,
    is_preflight,
)
from corsfly.http.cors.matcher import CorsDecision, RequestContext, decide
from corsfly.http.cors.policy import (
    ANY_ORIGIN,
    CorsSettingsSource,
    OriginKind,
    OriginSpec,
    PolicyConfig,
    PropertiesSettingsSource,
)

__all__ = [
    "ACCESS_CONTROL_ALLOW_CREDENTIALS",
    "ACCESS_CONTROL_ALLOW_HEADERS",
    "ACCESS_CONTROL_ALLOW_METHODS",
    "ACCESS_CONTROL_ALLOW_ORIGIN",
    "ACCESS_CONTROL_MAX_AGE",
    "ACCESS_CONTROL_REQUEST_METHOD",
    "ANY_ORIGIN",
    "CorsDecision",
    "CorsSettingsSource",
    "OriginKind",
    "OriginSpec",
    "PolicyConfig",
    "PropertiesSettingsSource",
    "RequestContext",
    "compose",
    "compose_preflight",
    "decide",
    "is_preflight",
]
