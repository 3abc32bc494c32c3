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
"""Tests for response assembly."""

from __future__ import annotations

import pytest

from corsfly.http.assembler import assemble
from corsfly.http.response import BytesResponse


class TestAssemble:
    def test_cors_headers_carried_over(self):
        response = assemble({"Access-Control-Allow-Origin": "remote-host"}, BytesResponse())
        assert response.headers["access-control-allow-origin"] == "remote-host"

    def test_no_cors_headers(self):
        response = assemble({}, BytesResponse(b"hi"))
        assert set(response.headers.keys()) == {"content-type", "content-length"}

    @pytest.mark.parametrize("body", [b"", b"x", "héllo".encode(), b"\x00" * 4096])
    def test_content_length_is_body_length(self, body):
        response = assemble({}, BytesResponse(body))
        assert response.headers["Content-Length"] == str(len(body))
        assert response.body == body

    def test_str_content_encoded_before_measuring(self):
        response = assemble({}, BytesResponse("héllo"))
        assert response.headers["Content-Length"] == "6"

    def test_caller_content_length_is_replaced(self):
        app = BytesResponse(b"abc")
        app.add_header("Content-Length", "999")
        response = assemble({}, app)
        assert response.headers.getlist("content-length") == ["3"]

    def test_content_type_from_application(self):
        app = BytesResponse(b"{}", content_type="application/json")
        app.add_header("Content-Type", "text/html")
        response = assemble({}, app)
        assert response.headers.getlist("Content-Type") == ["application/json"]

    def test_custom_headers_and_status(self):
        app = BytesResponse(b"", status=201)
        app.add_header("custom-header", "xyz")
        response = assemble({"Access-Control-Allow-Origin": "a"}, app)
        assert response.status == 201
        assert response.headers["Custom-Header"] == "xyz"
        assert response.headers["Access-Control-Allow-Origin"] == "a"

    def test_application_header_wins_on_collision(self):
        app = BytesResponse()
        app.add_header("Access-Control-Allow-Origin", "app-value")
        response = assemble({"Access-Control-Allow-Origin": "cors-value"}, app)
        assert response.headers.getlist("Access-Control-Allow-Origin") == ["app-value"]

    def test_multi_valued_custom_header(self):
        app = BytesResponse()
        app.add_header("Set-Cookie", "a=1")
        app.add_header("Set-Cookie", "b=2")
        response = assemble({}, app)
        assert response.headers.getlist("set-cookie") == ["a=1", "b=2"]

    def test_header_names_differing_in_case_keep_both_values(self):
        app = BytesResponse()
        app.add_header("X-A", "1")
        app.add_header("x-a", "2")
        assert app.headers == {"X-A": ["1", "2"]}
        response = assemble({}, app)
        assert response.headers.getlist("x-a") == ["1", "2"]
