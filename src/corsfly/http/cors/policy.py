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
"""Immutable CORS policy parsed once from configuration.

Parsing never fails: absent or malformed values degrade to "no origin
configured" or empty lists, which in turn means no CORS headers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from corsfly.config.properties.cors import CorsProperties

ANY_ORIGIN = "*"

DEFAULT_ALLOWED_HEADERS: tuple[str, ...] = ("X-Requested-With", "Content-Type", "Content-Length")
DEFAULT_MAX_AGE = 1728000  # 20 days, in seconds


class OriginKind(enum.Enum):
    NONE = "none"
    ANY = "any"
    EXACT = "exact"


@dataclass(frozen=True)
class OriginSpec:
    """The configured allow-origin value.

    ``EXACT`` carries the raw configured literal in ``value``; the other
    kinds carry ``None``.
    """

    kind: OriginKind
    value: str | None = None

    @classmethod
    def none(cls) -> OriginSpec:
        return cls(OriginKind.NONE)

    @classmethod
    def any(cls) -> OriginSpec:
        return cls(OriginKind.ANY)

    @classmethod
    def exact(cls, value: str) -> OriginSpec:
        return cls(OriginKind.EXACT, value)

    @classmethod
    def parse(cls, raw: str | None) -> OriginSpec:
        """Parse a raw allow-origin setting."""
        if raw is None:
            return cls.none()
        value = str(raw).strip()
        if not value:
            return cls.none()
        if value == ANY_ORIGIN:
            return cls.any()
        return cls.exact(value)


@runtime_checkable
class CorsSettingsSource(Protocol):
    """The four lookups a policy is built from.

    Sources may also provide ``allowed_headers_raw()`` and ``max_age()``;
    when they don't, the preflight defaults apply.
    """

    def is_enabled(self) -> bool: ...
    def allowed_origin_raw(self) -> str | None: ...
    def allowed_methods_raw(self) -> str | None: ...
    def allow_credentials(self) -> bool: ...


class PropertiesSettingsSource:
    """Adapts bound :class:`CorsProperties` to :class:`CorsSettingsSource`."""

    def __init__(self, properties: CorsProperties) -> None:
        self._properties = properties

    def is_enabled(self) -> bool:
        return bool(self._properties.enabled)

    def allowed_origin_raw(self) -> str | None:
        return self._properties.allow_origin

    def allowed_methods_raw(self) -> str | None:
        return self._properties.allow_methods

    def allow_credentials(self) -> bool:
        return bool(self._properties.allow_credentials)

    def allowed_headers_raw(self) -> str | None:
        return self._properties.allow_headers

    def max_age(self) -> Any:
        return self._properties.max_age


def _split_tokens(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        raw = ",".join(str(item) for item in raw)
    return [token.strip() for token in str(raw).split(",") if token.strip()]


def parse_methods(raw: Any) -> tuple[str, ...]:
    """Split a comma-separated method list into upper-cased, de-duplicated tokens.

    ``"get, options, post"`` -> ``("GET", "OPTIONS", "POST")``
    """
    return tuple(dict.fromkeys(token.upper() for token in _split_tokens(raw)))


def parse_headers(raw: Any) -> tuple[str, ...]:
    """Split a comma-separated header list, keeping the configured spelling."""
    if raw is None:
        return DEFAULT_ALLOWED_HEADERS
    return tuple(dict.fromkeys(_split_tokens(raw)))


def parse_max_age(raw: Any) -> int:
    if raw is None or isinstance(raw, bool):
        return DEFAULT_MAX_AGE
    try:
        value = int(str(raw).strip())
    except ValueError:
        return DEFAULT_MAX_AGE
    return value if value >= 0 else DEFAULT_MAX_AGE


@dataclass(frozen=True)
class PolicyConfig:
    """Parsed CORS policy. Built once per transport, shared read-only."""

    enabled: bool = False
    allowed_origin: OriginSpec = field(default_factory=OriginSpec.none)
    allowed_methods: tuple[str, ...] = ()
    allow_credentials: bool = False
    allowed_headers: tuple[str, ...] = DEFAULT_ALLOWED_HEADERS
    max_age: int = DEFAULT_MAX_AGE

    @classmethod
    def from_settings(cls, source: CorsSettingsSource) -> PolicyConfig:
        headers_lookup = getattr(source, "allowed_headers_raw", None)
        max_age_lookup = getattr(source, "max_age", None)
        return cls(
            enabled=bool(source.is_enabled()),
            allowed_origin=OriginSpec.parse(source.allowed_origin_raw()),
            allowed_methods=parse_methods(source.allowed_methods_raw()),
            allow_credentials=bool(source.allow_credentials()),
            allowed_headers=parse_headers(headers_lookup() if callable(headers_lookup) else None),
            max_age=parse_max_age(max_age_lookup() if callable(max_age_lookup) else None),
        )

    @classmethod
    def from_properties(cls, properties: CorsProperties) -> PolicyConfig:
        return cls.from_settings(PropertiesSettingsSource(properties))
