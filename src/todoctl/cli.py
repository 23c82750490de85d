"""Root CLI group for todoctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from todoctl import __version__
from todoctl.commands import register_commands
from todoctl.commands._context import AppContext
from todoctl.config.settings import TodoSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todoctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the persisted list.",
)
@click.option("--ephemeral", is_flag=True, help="Keep the list in memory only.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_dir: Path | None,
    ephemeral: bool,
) -> None:
    """todoctl: a small todo list for the terminal."""
    settings = TodoSettings.from_cli(
        config_path=config_path,
        data_dir=data_dir,
        ephemeral=ephemeral,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
