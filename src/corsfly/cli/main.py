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
"""corsfly CLI — inspect CORS policies."""

from __future__ import annotations

import click

from corsfly.cli.console import print_banner


class CorsflyCLI(click.Group):
    """Click group that shows the corsfly banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=CorsflyCLI)
@click.version_option(package_name="corsfly")
def cli() -> None:
    """corsfly — CORS policy decisioning for HTTP transports."""


from corsfly.cli.evaluate import evaluate_command
from corsfly.cli.info import info_command

cli.add_command(evaluate_command, name="evaluate")
cli.add_command(info_command, name="info")
