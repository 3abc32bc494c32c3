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
"""Tests for Config loading, env overrides, placeholders and binding."""

from __future__ import annotations

from pathlib import Path

import pytest

from corsfly.core.config import Config


class TestFromFile:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "corsfly.yaml"
        path.write_text("corsfly:\n  http:\n    cors:\n      enabled: true\n      allow-origin: remote-host\n")
        config = Config.from_file(path)
        assert config.get("corsfly.http.cors.enabled") is True
        assert config.get("corsfly.http.cors.allow-origin") == "remote-host"
        assert config.loaded_sources == [str(path)]

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "corsfly.toml"
        path.write_text('[corsfly.http.cors]\nenabled = true\nallow_methods = "get, post"\n')
        config = Config.from_file(path)
        assert config.get("corsfly.http.cors.allow_methods") == "get, post"

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "corsfly.yaml").write_text("corsfly:\n  http:\n    cors:\n      enabled: false\n      allow_origin: a\n")
        (tmp_path / "corsfly-prod.yaml").write_text("corsfly:\n  http:\n    cors:\n      enabled: true\n")
        config = Config.from_file(tmp_path / "corsfly.yaml", active_profiles=["prod"])
        assert config.get("corsfly.http.cors.enabled") is True
        assert config.get("corsfly.http.cors.allow_origin") == "a"
        assert len(config.loaded_sources) == 2

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "corsfly.yaml"
        path.write_text("corsfly:\n  http:\n    cors:\n      allow-origin: *\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            Config.from_file(path)

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "corsfly.ini"
        path.write_text("[x]\n")
        with pytest.raises(ValueError, match="Unsupported"):
            Config.from_file(path)


class TestGet:
    def test_default_for_missing_key(self):
        assert Config({}).get("corsfly.http.cors.enabled", False) is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CORSFLY_HTTP_CORS_ALLOW_ORIGIN", "from-env")
        config = Config({"corsfly": {"http": {"cors": {"allow-origin": "from-file"}}}})
        assert config.get("corsfly.http.cors.allow-origin") == "from-env"

    def test_placeholder_from_env(self, monkeypatch):
        monkeypatch.setenv("FRONTEND_ORIGIN", "https://app.example")
        config = Config({"corsfly": {"http": {"cors": {"allow_origin": "${FRONTEND_ORIGIN}"}}}})
        assert config.get("corsfly.http.cors.allow_origin") == "https://app.example"

    def test_placeholder_default(self):
        config = Config({"corsfly": {"http": {"cors": {"allow_origin": "${UNSET_ORIGIN_VAR:*}"}}}})
        assert config.get("corsfly.http.cors.allow_origin") == "*"

    def test_placeholder_from_config(self):
        config = Config({"app": {"origin": "https://a"}, "corsfly": {"http": {"cors": {"allow_origin": "${app.origin}"}}}})
        assert config.get("corsfly.http.cors.allow_origin") == "https://a"

    def test_unresolvable_placeholder(self):
        config = Config({"corsfly": {"x": "${NOT_A_REAL_KEY_ANYWHERE}"}})
        with pytest.raises(ValueError, match="Cannot resolve"):
            config.get("corsfly.x")

    def test_get_section(self):
        config = Config({"corsfly": {"http": {"cors": {"enabled": True}}}})
        assert config.get_section("corsfly.http.cors") == {"enabled": True}
        assert config.get_section("corsfly.nothing") == {}


class TestBindErrors:
    def test_undecorated_class(self):
        class Plain:
            pass

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
