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
"""'corsfly evaluate' — run a request through the CORS pipeline and show the result."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from corsfly.cli.console import console
from corsfly.core.config import Config
from corsfly.http.cors.headers import ACCESS_CONTROL_REQUEST_METHOD
from corsfly.http.request import HttpRequest
from corsfly.http.response import BytesResponse, OutgoingResponse
from corsfly.http.transport import HttpServerTransport
from corsfly.logging.structlog_adapter import StructlogAdapter


class _CapturingWriter:
    def __init__(self) -> None:
        self.written: list[OutgoingResponse] = []

    def write(self, response: OutgoingResponse) -> None:
        self.written.append(response)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML or TOML configuration file.",
)
@click.option("--profile", "profiles", multiple=True, help="Profile overlay to merge (repeatable).")
@click.option("--origin", required=True, help="Value of the request's Origin header.")
@click.option("--host", default=None, help="Value of the request's Host header.")
@click.option("--method", default="GET", show_default=True, help="HTTP method of the request.")
@click.option("--preflight", is_flag=True, help="Send as an OPTIONS preflight for --method.")
def evaluate_command(
    config_path: Path,
    profiles: tuple[str, ...],
    origin: str,
    host: str | None,
    method: str,
    preflight: bool,
) -> None:
    """Evaluate the CORS headers a request would receive."""
    try:
        config = Config.from_file(config_path, active_profiles=list(profiles))
        StructlogAdapter().configure(config)
        transport = HttpServerTransport(config)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    headers = {"Origin": origin}
    if host is not None:
        headers["Host"] = host
    if preflight:
        headers[ACCESS_CONTROL_REQUEST_METHOD] = method.upper()
        method = "OPTIONS"

    writer = _CapturingWriter()
    channel = transport.new_channel(HttpRequest(method=method, headers=headers), writer)
    if preflight and channel.is_preflight:
        channel.send_preflight()
    else:
        channel.send_response(BytesResponse())

    response = writer.written[0]
    cors = [(name, value) for name, value in response.headers.items() if name.startswith("access-control-")]

    console.print(f"\n[info]Status[/info] {response.status}")
    if not cors:
        console.print("[warning]no CORS headers[/warning]\n")
        return

    table = Table(title="CORS headers", border_style="dim")
    table.add_column("Header", style="info", no_wrap=True)
    table.add_column("Value", no_wrap=True)
    for name, value in cors:
        table.add_row(_title_case(name), _wire_text(value))
    console.print(table)
    console.print()


def _title_case(name: str) -> str:
    return "-".join(part.capitalize() for part in name.split("-"))


def _wire_text(value: str) -> str:
    # Header values are latin-1 views of the wire bytes.
    return value.encode("latin-1").decode("utf-8", errors="replace")
