"""
Study Sessions CLI — `study` command.

Commands:
  study            Interactive session menu (same as `study shell`)
  study shell      Interactive session menu
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install study-sessions[cli]")

from study_sessions import __version__
from study_sessions.ledger import SessionLedger

CONFIG_FILE = Path.home() / ".study-sessions" / "config.json"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_config(path: Optional[Path] = None) -> dict:
    try:
        cfg = json.loads((path or CONFIG_FILE).read_text())
    except (OSError, ValueError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _configure_logging(level_name: Union[str, int]) -> None:
    level = level_name if isinstance(level_name, int) else logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


@click.group(invoke_without_command=True)
@click.version_option(__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="STUDY_SESSIONS_CONFIG",
    default=None,
    help="Config file (default ~/.study-sessions/config.json)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Study Sessions — track what you study and for how long."""
    cfg = _load_config(config_path)
    _configure_logging("DEBUG" if verbose else cfg.get("log_level", "WARNING"))

    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", cfg)
    ctx.obj.setdefault("console", Console(soft_wrap=True))
    if "ledger" not in ctx.obj:
        ctx.obj["ledger"] = SessionLedger()

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell_cmd)


# Register subcommands from separate modules
from study_sessions.cli.shell import shell_cmd

main.add_command(shell_cmd)


if __name__ == "__main__":
    main()
