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
"""HTTP CORS configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from corsfly.core.config import config_properties


@config_properties(prefix="corsfly.http.cors")
@dataclass(frozen=True)
class CorsProperties:
    """Configuration for CORS handling on the HTTP transport (corsfly.http.cors.*).

    Raw values are kept as configured; parsing into a policy happens once in
    :class:`~corsfly.http.cors.policy.PolicyConfig`.
    """

    enabled: bool = False
    allow_origin: str = ""
    allow_methods: str = ""
    allow_credentials: bool = False
    allow_headers: str | None = None
    max_age: int | str | None = None
