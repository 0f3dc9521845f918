from rich import print
from rich.table import Table
from typing import List

import typer

from mssh.config import MergedConfig


def print_targets(targets: List[str]):
    for name in targets:
        typer.echo(name)


def print_host_table(config: MergedConfig):
    table = Table(title=f"Hosts in {config.source_path}")
    table.add_column("Name", style="magenta")
    table.add_column("Hostname", style="cyan")
    table.add_column("Via", style="green")
    table.add_column("GatewayCommand", style="yellow")

    for name in sorted(config.hosts):
        host = config.hosts[name]
        style = "dim" if name.startswith("_") else None
        table.add_row(name, host.hostname or "-", host.via or "-", host.gateway_command or "-", style=style)

    print(table)
