"""Link commands registered on the top-level Typer app."""

from pathlib import Path

import typer

from fslink.api.link.cmd_apply import cmd_apply
from fslink.api.link.cmd_check import cmd_check
from fslink.api.link.cmd_create import cmd_create
from fslink.api.link.cmd_init import cmd_init
from fslink.api.link.cmd_list import cmd_list
from fslink.api.link.cmd_remove import cmd_remove
from fslink.api.link.cmd_toggle import cmd_toggle

from ._handle_stage_result import _handle_stage_result


def register_link_commands(app: typer.Typer) -> None:
    """Add init, link, toggle, remove, list, check and apply to app."""

    @app.command(name="init")
    def init_cmd(
        path: str | None = typer.Argument(None, help="Project directory (default: current directory)"),
    ) -> None:
        """Create the .fslink link database in a project directory."""
        _handle_stage_result(cmd_init)(path=Path(path) if path is not None else None)

    @app.command(name="link")
    def link_cmd(
        source: str = typer.Argument(..., help="Source file or directory"),
        target: str = typer.Argument(..., help="Target link path"),
        hard: bool = typer.Option(False, "--hard", help="Create a hard link instead of a symbolic link"),
        enable: bool = typer.Option(False, "--enable", "-e", help="Create the link on disk right away"),
    ) -> None:
        """Track a new link (disabled until toggled unless --enable is given)."""
        _handle_stage_result(cmd_create)(source=source, target=target, kind="hard" if hard else None, enable=enable)

    @app.command(name="toggle")
    def toggle_cmd(
        ref: str = typer.Argument(..., help="Entry id or target path"),
    ) -> None:
        """Enable or disable a tracked link."""
        _handle_stage_result(cmd_toggle)(ref=ref)

    @app.command(name="remove")
    def remove_cmd(
        ref: str = typer.Argument(..., help="Entry id or target path"),
    ) -> None:
        """Stop tracking a link, removing it from disk if enabled."""
        _handle_stage_result(cmd_remove)(ref=ref)

    @app.command(name="list")
    def list_cmd() -> None:
        """List all tracked links."""
        _handle_stage_result(cmd_list)()

    @app.command(name="check")
    def check_cmd() -> None:
        """Report links that disagree with the database."""
        _handle_stage_result(cmd_check)()

    @app.command(name="apply")
    def apply_cmd() -> None:
        """Create or remove links so the filesystem matches the database."""
        _handle_stage_result(cmd_apply)()
