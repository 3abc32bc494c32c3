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
"""'corsfly info' — Display version and environment information."""

from __future__ import annotations

import platform
import sys

import click
from rich.table import Table

from corsfly import __version__
from corsfly.cli.console import console


@click.command()
def info_command() -> None:
    """Display corsfly and environment information."""
    console.print(f"\n[corsfly]corsfly[/corsfly] [dim]v{__version__}[/dim]\n")

    env_table = Table(title="Environment", show_header=False, border_style="dim")
    env_table.add_column("Key", style="info")
    env_table.add_column("Value")
    env_table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    env_table.add_row("Platform", platform.platform())
    env_table.add_row("Architecture", platform.machine())
    console.print(env_table)
    console.print()
