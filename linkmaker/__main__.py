import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from linkmaker.config import LinkerConfig, load_config
from linkmaker.constants import APP_NAME, MIN_REPORT_WIDTH
from linkmaker.errors import CommandFailedError, ConfigFileError, LinkError
from linkmaker.listing import list_links
from linkmaker.models import LinkType
from linkmaker.service import LinkService
from linkmaker.tui import LinkConsoleUI


LINK_TYPE_VALUES = [link_type.value for link_type in LinkType]

# level column plus padding added by RichHandler
_LOG_GUTTER = 10


def configure_logging(verbose: bool, report_width: int) -> None:
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(
            console=Console(stderr=True, width=report_width + _LOG_GUTTER),
            show_time=False,
            show_path=False,
            markup=False,
        )
    )


def _config_from_obj(obj: Dict[str, Any], width: Optional[int]) -> LinkerConfig:
    config: LinkerConfig = obj["config"]
    if width is not None:
        config = replace(config, report_width=width)
    return config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config.json.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]) -> None:
    """Create symbolic links, junctions and hardlinks."""
    try:
        config = load_config(config_path)
    except ConfigFileError as exc:
        raise click.ClickException(str(exc))
    configure_logging(verbose, config.report_width)
    ctx.obj = {"config": config, "verbose": verbose}


@cli.command(help="Create a link NAME pointing at DESTINATION.")
@click.argument("name")
@click.argument("destination")
@click.option(
    "-t",
    "--type",
    "link_type",
    type=click.Choice(LINK_TYPE_VALUES, case_sensitive=False),
    default=LinkType.SYMBOLIC_LINK.value,
    show_default=True,
    help="Kind of link to create.",
)
@click.option("--confirm", is_flag=True, help="Ask before running the link tool.")
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=MIN_REPORT_WIDTH),
    default=None,
    help="Column width of diagnostic reports.",
)
@click.pass_obj
def create(
    obj: Dict[str, Any],
    name: str,
    destination: str,
    link_type: str,
    confirm: bool,
    width: Optional[int],
) -> None:
    ui = LinkConsoleUI(Console())
    config = _config_from_obj(obj, width)
    if width is not None:
        configure_logging(obj["verbose"], config.report_width)
    service = LinkService(config=config)

    try:
        status = service.create_link(
            name, destination, LinkType(link_type.lower()), confirm=confirm
        )
    except CommandFailedError as exc:
        if exc.status is not None:
            ui.render_status(exc.status)
        raise click.exceptions.Exit(1)
    except LinkError as exc:
        ui.render_error(exc)
        raise click.exceptions.Exit(1)

    if status is None:
        ui.render_declined(name)
        return
    ui.render_status(status)


@cli.command("list", help="List symbolic links and junctions in PATH.")
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(path_type=Path, file_okay=False),
)
@click.option(
    "-f", "--filter", "name_filter", default=None, help="Wildcard name filter."
)
@click.pass_obj
def list_command(obj: Dict[str, Any], path: Path, name_filter: Optional[str]) -> None:
    ui = LinkConsoleUI(Console())
    try:
        entries = list_links(path, name_filter)
    except LinkError as exc:
        ui.render_error(exc)
        raise click.exceptions.Exit(1)
    ui.render_links(path.absolute(), entries)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
