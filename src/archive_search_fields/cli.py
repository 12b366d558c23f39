"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from archive_search_fields.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from archive_search_fields.date_normalization import InvalidDateFormat, normalize_incomplete_date
from archive_search_fields.visibility_filtering import (
    QueryFieldsRequest,
    expand_i18n_field_names,
    resolve_query_fields,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="archive-search-fields")
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Searchable field selection for archival description indexes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="query-fields")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option("--index-type", required=True, help="Index type to search, e.g. informationObject")
@click.option(
    "--template",
    "template_id",
    required=False,
    help="Description template overriding the configured default (isad, rad, ...)",
)
@click.option(
    "--privileged",
    is_flag=True,
    default=False,
    help="Resolve fields for an authenticated user; nothing is hidden.",
)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print all/hidden/visible fields as JSON"
)
def query_fields(
    config_path: str, index_type: str, template_id: str | None, privileged: bool, as_json: bool
) -> None:
    """Print the fields a full-text query searches for one index type."""
    try:
        configuration = load_configuration(config_path)
        resolved = resolve_query_fields(
            QueryFieldsRequest(
                index_type=index_type, privileged=privileged, template_id=template_id
            ),
            mappings=configuration.mappings,
            settings=configuration.settings,
            registry=configuration.relations,
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    if as_json:
        payload = {
            "index_type": resolved.index_type,
            "template": resolved.template_id,
            "cultures": list(resolved.cultures),
            "all_fields": list(resolved.all_fields),
            "hidden_fields": list(resolved.hidden_fields),
            "fields": resolved.as_query_fields(),
        }
        click.echo(json.dumps(payload, indent=2))
        return
    for field_name in resolved.as_query_fields():
        click.echo(field_name)


@cli.command(name="expand-fields")
@click.argument("patterns", nargs=-1, required=True)
@click.option(
    "--culture",
    "cultures",
    multiple=True,
    required=True,
    help="Culture to substitute for %s; repeat for several cultures",
)
@click.option(
    "--boost",
    "boosts",
    multiple=True,
    help="Boost for one pattern as PATTERN=VALUE; repeatable",
)
def expand_fields(
    patterns: tuple[str, ...], cultures: tuple[str, ...], boosts: tuple[str, ...]
) -> None:
    """Expand localized field patterns such as i18n.%s.title for each culture."""
    boost_table: dict[str, str] = {}
    for entry in boosts:
        pattern, separator, value = entry.rpartition("=")
        if not separator or not pattern or not value:
            raise CliError(f"Invalid boost '{entry}'. Expected PATTERN=VALUE.")
        boost_table[pattern] = value
    for field_name in expand_i18n_field_names(patterns, cultures, boost_table):
        click.echo(field_name)


@cli.command(name="normalize-date")
@click.argument("date_value")
@click.option(
    "--end", "end_of_range", is_flag=True, default=False, help="Use the last day of the range"
)
def normalize_date(date_value: str, end_of_range: bool) -> None:
    """Fill unknown month/day parts of a YYYY-MM-DD date."""
    try:
        normalized = normalize_incomplete_date(date_value, end_of_range)
    except InvalidDateFormat as exc:
        raise CliError(str(exc)) from exc
    if normalized is not None:
        click.echo(normalized)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
