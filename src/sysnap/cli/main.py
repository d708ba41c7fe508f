"""sysnap CLI - Main entry point."""

import logging
from typing import NoReturn

import click
from rich.console import Console

from sysnap import __version__

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: int) -> None:
    """Send log records to stderr so stdout carries only the report."""
    log_format = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_sysnap", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(log_format))
    handler._sysnap = True
    root_logger.addHandler(handler)


def _fail(message: str) -> NoReturn:
    err_console.print(
        f"Error: {message}", markup=False, highlight=False, emoji=False, soft_wrap=True
    )
    raise SystemExit(1)


@click.command()
@click.version_option(version=__version__, prog_name="sysnap")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Print a system metrics snapshot and save it to system_info.json.

    Reports OS, CPU cores, memory, swap, disks and network interfaces.
    Set SYSNAP_INCLUDE_DISKS=0 or SYSNAP_INCLUDE_NETWORKS=0 to skip a
    section.
    """
    from sysnap.collectors.system_info import collect_system_info
    from sysnap.config import load_config
    from sysnap.errors import ConfigError, ReportError
    from sysnap.reporters.console import print_report
    from sysnap.reporters.json_reporter import save_json_report

    try:
        config = load_config()
    except ConfigError as e:
        _fail(str(e))

    _setup_logging(logging.DEBUG if verbose else config.logging_level)

    info = collect_system_info(
        include_disks=config.include_disks,
        include_networks=config.include_networks,
    )
    print_report(info, console)

    try:
        output_path = save_json_report(info)
    except ReportError as e:
        logger.debug(f"Report failed ({e.kind.name})", exc_info=e.cause)
        _fail(str(e))

    console.print(
        f"System information saved to {output_path.name}",
        markup=False,
        highlight=False,
        emoji=False,
    )


if __name__ == "__main__":
    cli()
