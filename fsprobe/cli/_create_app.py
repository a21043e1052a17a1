"""Create the main Typer CLI app."""

import typer

from fsprobe.cli.actions import actions_command
from fsprobe.cli.run import run_command


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Probe which filesystem notifications the OS emits for common file operations",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Log every action step and event (overrides log_level in the config file)"),
    ) -> None:
        from fsprobe.utils.configure_logging import configure_logging

        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if verbose:
            level = "DEBUG"
        else:
            from fsprobe.api.config.ProbeConfig import ProbeConfig

            try:
                level = ProbeConfig.load().log_level
            except ValueError as e:
                typer.echo(f"Error: {e}", err=True)
                raise typer.Exit(1) from e
        configure_logging(level=level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    app.command(name="run")(run_command)
    app.command(name="actions")(actions_command)

    return app
