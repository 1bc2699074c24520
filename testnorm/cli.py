"""Command-line interface for testnorm."""

import sys
from pathlib import Path

import click

from .config.errors import ConfigError
from .config.loader import CONFIG_FILENAME, find_config, load_config
from .config.models import NormalizerConfig
from .files import FileAccessError, discover_files
from .logging_config import LOG_LEVELS, setup_logging
from .output.formatter import format_corpus_report, format_fix_result
from .runner import fix_corpus, report_corpus


def _load_corpus(
    root: str, config_file: str | None, keyword: str | None, pattern: str | None
) -> tuple[NormalizerConfig, list[Path]]:
    """Resolve configuration and discover candidate files, exiting 2 on error.

    Without --config, a .testnorm.yaml at the top of ROOT is used if present.
    """
    config_path = config_file or find_config(root)
    try:
        config = load_config(config_path, keyword=keyword, file_pattern=pattern)
        paths = discover_files(root, config.file_pattern, config.exclude)
    except ConfigError as e:
        click.echo(f"Config error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except FileAccessError as e:
        click.echo(f"Error reading root: {e}", err=True)
        sys.exit(2)
    return config, paths


@click.group()
@click.version_option(package_name="testnorm")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (logs go to stderr)",
)
def main(log_level: str):
    """testnorm: enforce the -test suffix convention on test names."""
    setup_logging(log_level)


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help=f"YAML configuration file (default: ROOT/{CONFIG_FILENAME})",
)
@click.option("--keyword", help="Test-definition keyword, e.g. '(deftest'")
@click.option("--pattern", help="Glob pattern for candidate file names")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit non-zero when any name breaks the convention",
)
def check(
    root: str,
    config_file: str | None,
    keyword: str | None,
    pattern: str | None,
    output_format: str,
    strict: bool,
):
    """Report how test names under ROOT follow the naming convention.

    No file is modified.

    Exit codes:
      0 - Check completed
      1 - Violations found (with --strict) or files could not be read
      2 - Config or root directory error
    """
    config, paths = _load_corpus(root, config_file, keyword, pattern)
    report = report_corpus(paths, config.keyword)

    click.echo(format_corpus_report(report, output_format))  # type: ignore

    if report.failures:
        sys.exit(1)
    elif strict and report.has_violations:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help=f"YAML configuration file (default: ROOT/{CONFIG_FILENAME})",
)
@click.option("--keyword", help="Test-definition keyword, e.g. '(deftest'")
@click.option("--pattern", help="Glob pattern for candidate file names")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would change without writing files",
)
def fix(
    root: str,
    config_file: str | None,
    keyword: str | None,
    pattern: str | None,
    output_format: str,
    dry_run: bool,
):
    """Rewrite non-conforming test names under ROOT in place.

    A name is only rewritten when its category has a deterministic fix and
    it is declared on exactly one test-definition line of its file.

    Exit codes:
      0 - Success
      1 - One or more files could not be read or written
      2 - Config or root directory error
    """
    config, paths = _load_corpus(root, config_file, keyword, pattern)
    result = fix_corpus(paths, config.keyword, dry_run=dry_run)

    click.echo(format_fix_result(result, output_format, dry_run=dry_run))  # type: ignore

    sys.exit(1 if result.failed_files else 0)


if __name__ == "__main__":
    main()
