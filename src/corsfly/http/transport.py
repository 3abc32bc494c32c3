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
"""HttpServerTransport — owns the CORS policy and hands out request channels."""

from __future__ import annotations

import logging

from corsfly.config.properties.cors import CorsProperties
from corsfly.core.config import Config
from corsfly.http.channel import HttpChannel
from corsfly.http.cors.policy import PolicyConfig
from corsfly.http.ports.outbound import ResponseWriter
from corsfly.http.request import HttpRequest

logger = logging.getLogger(__name__)


class HttpServerTransport:
    """Server-side transport state shared by every request.

    The policy is parsed once here and never mutated, so channels on any
    thread or event loop may read it without locking.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._policy = PolicyConfig.from_properties(self._config.bind(CorsProperties))
        logger.info(
            "cors policy: enabled=%s origin=%s methods=%s credentials=%s",
            self._policy.enabled,
            self._policy.allowed_origin.kind.value,
            ",".join(self._policy.allowed_methods) or "-",
            self._policy.allow_credentials,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    def new_channel(self, request: HttpRequest, writer: ResponseWriter) -> HttpChannel:
        return HttpChannel(self, request, writer)
