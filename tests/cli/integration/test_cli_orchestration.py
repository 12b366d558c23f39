"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from archive_search_fields.cli import cli
from click.testing import CliRunner


def _write_config(tmp_path: Path, *, visibility: dict[str, object] | None = None) -> Path:
    config = {
        "mappings": {
            "inline": {
                "informationObject": {
                    "properties": {
                        "identifier": {"type": "string"},
                        "levelOfDescriptionId": {"type": "integer"},
                        "i18n": {
                            "properties": {
                                "en": {
                                    "properties": {
                                        "title": {"type": "string"},
                                        "sources": {"type": "string"},
                                    }
                                }
                            }
                        },
                    }
                },
                "repository": {"properties": {"identifier": {"type": "string"}}},
            }
        },
        "settings": {
            "i18n_languages": ["en"],
            "element_visibility": visibility or {"isad_control_sources": "0"},
            "default_template": {"informationobject": "isad"},
        },
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
    return path


def test_query_fields_prints_visible_fields(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        cli, ["query-fields", "--config", str(config_path), "--index-type", "informationObject"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["identifier", "i18n.en.title"]


def test_query_fields_privileged_flag_keeps_hidden_fields(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        cli,
        [
            "query-fields",
            "--config",
            str(config_path),
            "--index-type",
            "informationObject",
            "--privileged",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["identifier", "i18n.en.title", "i18n.en.sources"]


def test_query_fields_json_output(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, visibility={"rad_control_sources": False})

    result = runner.invoke(
        cli,
        [
            "query-fields",
            "--config",
            str(config_path),
            "--index-type",
            "informationObject",
            "--template",
            "rad",
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {
        "index_type": "informationObject",
        "template": "rad",
        "cultures": ["en"],
        "all_fields": ["identifier", "i18n.en.title", "i18n.en.sources"],
        "hidden_fields": ["i18n.en.sources"],
        "fields": ["identifier", "i18n.en.title"],
    }


def test_query_fields_unknown_index_type_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        cli, ["query-fields", "--config", str(config_path), "--index-type", "term"]
    )

    assert result.exit_code != 0
    assert "Unrecognized index type: term" in str(result.exception)


def test_expand_fields_applies_boosts() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "expand-fields",
            "i18n.%s.title",
            "i18n.%s.scopeAndContent",
            "--culture",
            "en",
            "--culture",
            "fr",
            "--boost",
            "i18n.%s.title=10",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "i18n.en.title^10",
        "i18n.en.scopeAndContent",
        "i18n.fr.title^10",
        "i18n.fr.scopeAndContent",
    ]


def test_normalize_date_command() -> None:
    runner = CliRunner()

    start = runner.invoke(cli, ["normalize-date", "2014-00-00"])
    end = runner.invoke(cli, ["normalize-date", "2000-02-00", "--end"])
    zero_year = runner.invoke(cli, ["normalize-date", "0000-00-00"])

    assert start.output == "2014-01-01\n"
    assert end.output == "2000-02-29\n"
    assert zero_year.exit_code == 0
    assert zero_year.output == ""


def test_generate_config_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "search-fields.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0, result.output
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output
