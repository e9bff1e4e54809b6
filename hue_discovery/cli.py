"""CLI entry point for Hue bridge discovery.

    hue-discovery [options]
    python -m hue_discovery [options]

Prints a JSON envelope on stdout. Logging goes to stderr with --verbose.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import DiscoveryConfig, load_config, validate_config
from .discovery.ssdp_collector import SSDPCollector
from .errors import DiscoveryError
from .reporting.json_reporter import JsonReporter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@click.option("--man", default=None, help='MAN header value (default: "ssdp:discover").')
@click.option("--timeout", type=float, default=None, help="Collection deadline in seconds (default: 3).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with discovery settings.",
)
@click.option(
    "--save-report",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the full report to this JSON file.",
)
@click.option("--pretty", is_flag=True, help="Pretty print output.")
@click.option("-v", "--verbose", is_flag=True, help="Log discovery events to stderr.")
@click.version_option(version=__version__)
def main(
    man: Optional[str],
    timeout: Optional[float],
    config_path: Optional[str],
    save_report: Optional[str],
    pretty: bool,
    verbose: bool,
):
    """Discover Hue bridges on the local network via SSDP."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=LOG_FORMAT)

    try:
        config = load_config(config_path) if config_path else DiscoveryConfig()
    except (FileNotFoundError, ValueError) as e:
        output_error(f"Failed to load config: {e}", pretty=pretty)
        sys.exit(1)

    if timeout is not None:
        config.timeout = timeout

    validation = validate_config(config)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        output_error(f"Invalid config: {errors_str}", pretty=pretty)
        sys.exit(1)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.path, warning.message)

    if man is None:
        man = config.man
    result = None
    error = None

    try:
        result = SSDPCollector(config).discover(man)
    except DiscoveryError as e:
        logger.error("Discovery failed: %s", e)
        result = e.result
        error = str(e)
    except KeyboardInterrupt:
        output_error("Discovery interrupted by user", pretty=pretty)
        sys.exit(130)

    reporter = JsonReporter()
    report = reporter.generate(result, man, error=error)

    report_path = None
    if save_report:
        report_path = str(reporter.save(report, Path(save_report)))

    output = reporter.generate_cli_output(report, report_path)
    click.echo(reporter.to_json_string(output, pretty=pretty))

    if not output["success"]:
        sys.exit(1)


def output_error(message: str, pretty: bool = False, **extra):
    """Output error in the CLI JSON envelope."""
    output = {
        "success": False,
        "command": "discover",
        "data": extra or None,
        "message": message,
    }
    click.echo(json.dumps(output, indent=2 if pretty else None, ensure_ascii=False))


if __name__ == "__main__":
    main()
