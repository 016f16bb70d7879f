"""Root CLI group for treelayout with global flags and command registration."""

from __future__ import annotations

import click

from treelayout import __version__
from treelayout.commands import register_commands
from treelayout.commands._context import AppContext
from treelayout.config.settings import TreeLayoutSettings


_EPILOG = """\b
Settings are merged from, highest priority first:
  command-line flags
  TREELAYOUT_* environment variables (e.g. TREELAYOUT_CHECK__TOLERANCE)
  treelayout.toml, found by walking up from the current directory
    (or named by --config / TREELAYOUT_CONFIG)
"""


@click.group(
    invoke_without_command=True,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="treelayout")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """treelayout — inspect and check tree layout snapshots."""
    settings = TreeLayoutSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
