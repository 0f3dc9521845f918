#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command Line Interface for mssh (Typer-based)

    mssh [OPTIONS] FILTER...
"""

from typing import List, Optional

import typer
from loguru import logger

from mssh.config import DEFAULT_CONFIG_PATH, load_config
from mssh.core import FilterSpec, LaunchOrchestrator, load_launcher, resolve_targets
from mssh.errors import MsshError, UsageError
from mssh.log import setup_logging
from mssh.version import __version__

from .util import print_host_table, print_targets

app = typer.Typer(
    name="mssh",
    help="mssh - Open SSH sessions to every configured host matching the filters",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"mssh {__version__}")
        raise typer.Exit()


def run(
    config_path: str,
    filters: List[str],
    dry_run: bool = False,
    fixed_string: bool = False,
    yes: bool = False,
    use_tmux: bool = False,
    list_hosts: bool = False,
) -> List[str]:
    """Resolve and launch; returns the targets that failed to launch."""
    config = load_config(config_path)

    if list_hosts:
        print_host_table(config)
        return []

    if not filters:
        raise UsageError("At least one filter is required")

    spec = FilterSpec.from_flags(filters, fixed_string=fixed_string)
    targets = resolve_targets(config.names(), spec)
    print_targets(targets)

    if dry_run:
        return []

    orchestrator = LaunchOrchestrator(config, load_launcher(use_tmux), assume_yes=yes)
    return orchestrator.run(targets)


@app.command()
def connect(
    filters: Optional[List[str]] = typer.Argument(None, help="Host name filters (regular expressions unless -f)"),
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--config-file", "-c", envvar="MSSH_CONFIG", help="Config file path"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Show target hosts and exit"),
    fixed_string: bool = typer.Option(False, "--fixed-string", "-f", help="Match filters literally and select hosts matching any of them"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Say yes"),
    use_tmux: bool = typer.Option(False, "--tmux", "-t", help="Open every host in a new tmux window"),
    list_hosts: bool = typer.Option(False, "--list-hosts", "-l", help="Show the merged host table and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
):
    """
    Connect to every configured host matching the filters
    """
    setup_logging(verbose)
    try:
        failed = run(config_path, filters or [], dry_run, fixed_string, yes, use_tmux, list_hosts)
    except MsshError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    if failed:
        logger.warning(f"Failed hosts: {', '.join(failed)}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
