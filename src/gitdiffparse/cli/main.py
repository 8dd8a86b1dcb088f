"""gitdiffparse CLI entry point."""

import sys
from pathlib import Path

import click

from gitdiffparse import __version__
from gitdiffparse.core.config import ConfigError, load_config, merge_cli_args
from gitdiffparse.diff.errors import DiffError
from gitdiffparse.diff.parser import parse_diff, parse_diff_file, parse_quick_diff
from gitdiffparse.diff.types import ParsedDiff
from gitdiffparse.logging import configure_logging, get_logger
from gitdiffparse.output import get_formatter

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gitdiffparse")
def cli() -> None:
    """gitdiffparse - structured records from git diff output.

    Reads the output of `git diff` (or `git diff --name-status`) and prints
    one record per changed file.
    """
    pass


@cli.command()
@click.argument("target", type=click.Path(allow_dash=True), default="-")
@click.option(
    "--quick",
    is_flag=True,
    default=False,
    help="TARGET holds name-status output (<status><TAB><path>).",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "-f",
    "--output-file",
    type=click.Path(),
    default=None,
    help="Write output to file (default: stdout).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Config file path (default: .gitdiffparse.yaml).",
)
@click.option(
    "--patch/--no-patch",
    "include_patch",
    default=None,
    help="Include patch bodies in the output.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def parse(
    target: str,
    quick: bool,
    output_format: str | None,
    output_file: str | None,
    config_path: str | None,
    include_patch: bool | None,
    verbose: bool,
) -> None:
    """Parse diff output and print its records.

    TARGET is a patch file, or "-" (the default) to read standard input.
    """
    try:
        config = load_config(config_path)
        config = merge_cli_args(
            config,
            output_format=output_format,
            include_patch=include_patch,
            log_level="DEBUG" if verbose else None,
        )
        configure_logging(config.log_level, config.log_format)

        diff = _read_target(target, quick)
        logger.info("diff_parsed", target=target, records=len(diff))

        formatter = get_formatter(config.output_format)
        output = formatter.format(diff, target, include_patch=config.include_patch)

        if output_file:
            Path(output_file).write_text(output)
            click.echo(f"Output written to {output_file}")
        else:
            click.echo(output)

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except DiffError as e:
        click.echo(f"Parse error: {e}", err=True)
        sys.exit(3)


def _read_target(target: str, quick: bool) -> ParsedDiff:
    """Parse TARGET, reading standard input for "-"."""
    if target != "-":
        return parse_diff_file(target, quick=quick)

    content = click.get_text_stream("stdin").read()
    if quick:
        return parse_quick_diff(content)
    return parse_diff(content)


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing config file.",
)
def init(force: bool) -> None:
    """Create .gitdiffparse.yaml config file."""
    config_path = Path(".gitdiffparse.yaml")

    if config_path.exists() and not force:
        click.echo(
            "Config file already exists. Use --force to overwrite.", err=True
        )
        sys.exit(1)

    default_config = """\
# gitdiffparse configuration

output:
  format: text          # text or json
  include_patch: false  # print patch bodies under each record

logging:
  level: WARNING
  format: console       # console or json
"""
    config_path.write_text(default_config)
    click.echo(f"Created {config_path}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
