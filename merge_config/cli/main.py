"""CLI for inspecting layered configuration."""

import json
from pathlib import Path
from typing import Optional

import click
import yaml
from dotenv import load_dotenv
from pydantic_core import to_jsonable_python

from merge_config import __version__
from merge_config.config.exceptions import MergeConfigError
from merge_config.config.loader import ConfigLoader
from merge_config.paths import PathFilter, create_filter
from merge_config.utils.logging import setup_logging


def _build_filter(keywords: tuple[str, ...], wildcards: tuple[str, ...]) -> Optional[PathFilter]:
    if keywords and wildcards:
        raise click.UsageError("--keyword and --wildcard cannot be combined")
    if keywords:
        return create_filter("keywords", keywords)
    if wildcards:
        return create_filter("wildcards", wildcards)
    return None


def filter_options(func):
    """Shared --keyword / --wildcard options."""
    func = click.option(
        "--wildcard",
        "-w",
        "wildcards",
        multiple=True,
        help="Include directory files matching any of these globs",
    )(func)
    func = click.option(
        "--keyword",
        "-k",
        "keywords",
        multiple=True,
        help="Include directory files whose name contains all keywords",
    )(func)
    return func


locations_argument = click.argument(
    "locations", nargs=-1, required=True, type=click.Path(path_type=Path)
)


@click.group()
@click.version_option(version=__version__, prog_name="merge-config")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="MERGE_CONFIG_LOG_LEVEL",
    show_default=True,
    help="Log level (DEBUG shows resolved and merged files)",
)
@click.option(
    "--log-format",
    type=click.Choice(["standard", "json"]),
    default="standard",
    envvar="MERGE_CONFIG_LOG_FORMAT",
    show_default=True,
    help="Log line format",
)
def cli(log_level: str, log_format: str):
    """Merge layered TOML/JSON config files."""
    try:
        setup_logging(level=log_level, format_style=log_format)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")


@cli.command()
@locations_argument
@filter_options
def paths(locations: tuple[Path, ...], keywords: tuple[str, ...], wildcards: tuple[str, ...]):
    """Show config files in merge order."""
    loader = ConfigLoader(path_filter=_build_filter(keywords, wildcards))

    try:
        resolved = loader.resolve(locations)
    except MergeConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for path in resolved:
        click.echo(str(path))


@cli.command()
@locations_argument
@filter_options
@click.option(
    "--merge-nested/--no-merge-nested",
    default=True,
    show_default=True,
    help="Recurse into tables/objects instead of replacing them",
)
@click.option(
    "--extend-array/--no-extend-array",
    default=True,
    show_default=True,
    help="Append to arrays instead of replacing them",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
def show(
    locations: tuple[Path, ...],
    keywords: tuple[str, ...],
    wildcards: tuple[str, ...],
    merge_nested: bool,
    extend_array: bool,
    output: str,
):
    """Show the merged configuration."""
    loader = ConfigLoader(
        merge_nested=merge_nested,
        extend_array=extend_array,
        path_filter=_build_filter(keywords, wildcards),
    )

    try:
        merged = loader.merge(locations)
    except MergeConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    # TOML dates and times become ISO strings, same as before decoding
    document = to_jsonable_python(merged)
    if output == "yaml":
        click.echo(yaml.safe_dump(document, sort_keys=False, allow_unicode=True), nl=False)
    else:
        click.echo(json.dumps(document, indent=2, ensure_ascii=False))


def main():
    """Entry point."""
    load_dotenv(Path.cwd() / ".env")
    cli()


if __name__ == "__main__":
    main()
