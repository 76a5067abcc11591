"""
jlic — CLI entrypoint.

Usage:
    jlic --help
    jlic              # write LICENSE.md next to Cargo.toml
    jlic -j -c        # write JLICENSE.md and point Cargo.toml at it
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from jlic import __version__
from jlic.core.observability.logging_config import init_logs

logger = logging.getLogger(__name__)

# Printed after the generated filename on success
SUCCESS = (
    "was generated successfully.\n"
    "Please consult with legal professionals to ensure that this document aligns\n"
    "with your specific requirements and complies with relevant laws."
)


@click.command()
@click.version_option(version=__version__, prog_name="jlic")
@click.option("--prefix", "-j", is_flag=True, help="Enable 'J' prefix in generated filename.")
@click.option("--update", "-c", is_flag=True, help="Update license information in Cargo.toml.")
@click.option("--debug", "-d", is_flag=True, help="Enable verbose logging.")
@click.option("--verbose", "-v", is_flag=True, help="Log package metadata as it is read.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--no-stage", is_flag=True, help="Don't 'git add' the generated file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def cli(
    prefix: bool,
    update: bool,
    debug: bool,
    verbose: bool,
    quiet: bool,
    no_stage: bool,
    as_json: bool,
) -> None:
    """Generate a license file for the enclosing Rust crate."""
    init_logs(debug=debug, verbose=verbose, quiet=quiet)
    logger.debug("Verbose logging %s", "enabled" if debug else "disabled")
    logger.debug("'J' prefix is %s", "enabled" if prefix else "disabled")
    logger.debug("Cargo.toml will %sbe overwritten", "" if update else "not ")

    from jlic.core.use_cases.generate import generate_license

    result = generate_license(Path.cwd(), prefix=prefix, update=update, stage=not no_stage)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.secho(f"{result.filename} {SUCCESS}", fg="green")


if __name__ == "__main__":
    cli()
