"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from fslink.api.config.FslinkConfig import FslinkConfig
    from fslink.cli._create_app import _create_app
    from fslink.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-V"]):
        from fslink.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"fslink {result.output['full_version']}")
        return 0

    # An invalid config is reported by the command itself
    try:
        log_config = FslinkConfig.load().log
        configure_logging(level=log_config.level, max_bytes=log_config.max_bytes, backup_count=log_config.backup_count)
    except ValueError:
        configure_logging()

    app = _create_app()
    try:
        # Without standalone mode click returns the exit code of typer.Exit instead of raising it
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Abort:
        return 130
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
