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
"""Tests for the Starlette CorsMiddleware."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from corsfly.core.config import Config
from corsfly.http.cors.policy import OriginSpec, PolicyConfig
from corsfly.web.adapters.starlette.cors import CorsMiddleware


async def _hello(request):  # noqa: ANN001
    return JSONResponse({"msg": "hello"})


async def _custom(request):  # noqa: ANN001
    return PlainTextResponse("ok", headers={"Access-Control-Allow-Origin": "from-app"})


def _make_client(policy: PolicyConfig | None = None, config: Config | None = None) -> TestClient:
    app = Starlette(
        routes=[Route("/hello", _hello, methods=["GET", "POST"]), Route("/custom", _custom)],
        middleware=[Middleware(CorsMiddleware, policy=policy, config=config)],
    )
    return TestClient(app)


class TestSimpleRequests:
    def test_disabled_adds_nothing(self):
        client = _make_client(PolicyConfig(enabled=False, allowed_origin=OriginSpec.any()))
        resp = client.get("/hello", headers={"Origin": "http://testserver"})
        assert resp.status_code == 200
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_exact_origin(self):
        policy = PolicyConfig(
            enabled=True,
            allowed_origin=OriginSpec.exact("http://example.com"),
            allowed_methods=("GET", "POST"),
            allow_credentials=True,
        )
        resp = _make_client(policy).get("/hello", headers={"Origin": "http://example.com"})
        assert resp.json() == {"msg": "hello"}
        assert resp.headers["Access-Control-Allow-Origin"] == "http://example.com"
        assert resp.headers["Access-Control-Allow-Credentials"] == "true"
        assert resp.headers["Access-Control-Allow-Methods"] == "GET, POST"

    def test_unlisted_origin(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.exact("http://example.com"))
        resp = _make_client(policy).get("/hello", headers={"Origin": "http://evil.com"})
        assert resp.status_code == 200
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_same_host_without_allow_origin(self):
        resp = _make_client(PolicyConfig(enabled=True)).get("/hello", headers={"Origin": "http://testserver"})
        assert resp.headers["Access-Control-Allow-Origin"] == "http://testserver"

    def test_no_origin_header(self):
        resp = _make_client(PolicyConfig(enabled=True, allowed_origin=OriginSpec.any())).get("/hello")
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_application_header_wins(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.any())
        resp = _make_client(policy).get("/custom", headers={"Origin": "http://example.com"})
        assert resp.headers["Access-Control-Allow-Origin"] == "from-app"

    def test_policy_from_config(self):
        config = Config({"corsfly": {"http": {"cors": {"enabled": True, "allow-origin": "*"}}}})
        resp = _make_client(config=config).get("/hello", headers={"Origin": "http://anywhere"})
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_vary_origin_when_origin_is_echoed(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.exact("http://example.com"))
        resp = _make_client(policy).get("/hello", headers={"Origin": "http://example.com"})
        assert resp.headers["Vary"] == "Origin"

    def test_vary_origin_on_unmatched_origin(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.exact("http://example.com"))
        resp = _make_client(policy).get("/hello", headers={"Origin": "http://evil.com"})
        assert "Access-Control-Allow-Origin" not in resp.headers
        assert resp.headers["Vary"] == "Origin"

    def test_no_vary_for_wildcard(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.any())
        resp = _make_client(policy).get("/hello", headers={"Origin": "http://example.com"})
        assert "Vary" not in resp.headers


class TestPreflight:
    def test_matching_preflight_short_circuits(self):
        policy = PolicyConfig(
            enabled=True,
            allowed_origin=OriginSpec.exact("http://example.com"),
            allowed_methods=("GET", "POST"),
            max_age=600,
        )
        resp = _make_client(policy).options(
            "/hello",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 200
        assert resp.headers["Access-Control-Allow-Origin"] == "http://example.com"
        assert resp.headers["Access-Control-Allow-Methods"] == "GET, POST"
        assert resp.headers["Access-Control-Allow-Headers"] == "X-Requested-With, Content-Type, Content-Length"
        assert resp.headers["Access-Control-Max-Age"] == "600"

    def test_rejected_preflight(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.exact("http://example.com"))
        resp = _make_client(policy).options(
            "/hello",
            headers={"Origin": "http://evil.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 403
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_options_without_request_method_reaches_app(self):
        policy = PolicyConfig(enabled=True, allowed_origin=OriginSpec.any())
        resp = _make_client(policy).options("/hello", headers={"Origin": "http://example.com"})
        assert resp.status_code == 405
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight_varies_on_origin(self):
        policy = PolicyConfig(enabled=True)
        resp = _make_client(policy).options(
            "/hello",
            headers={"Origin": "http://testserver", "Access-Control-Request-Method": "GET"},
        )
        assert resp.status_code == 200
        assert resp.headers["Vary"] == "Origin"
