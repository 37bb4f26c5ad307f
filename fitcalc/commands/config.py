"""Configuration commands."""

from __future__ import annotations

import typer

from fitcalc.commands.common import get_state, print_json_payload
from fitcalc.core.config import DEFAULT_CONFIG, save_config


def config_init_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write the default configuration to the config path."""
    state = get_state(ctx)
    path = state.config_path

    if path.exists() and not force:
        typer.echo(f"Config file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    save_config(DEFAULT_CONFIG, path)

    if state.json_output:
        print_json_payload(state, {"status": "success", "config_path": str(path)})
        return
    state.console.print(f"Wrote default config to {path}")
