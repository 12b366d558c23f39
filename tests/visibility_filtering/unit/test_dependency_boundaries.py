"""Boundary tests for the field selection core dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_field_selection_core_does_not_import_configuration_or_cli() -> None:
    package_dir = _project_root() / "src" / "archive_search_fields"
    core_modules = (
        package_dir / "schema_management" / "schema_projection.py",
        package_dir / "visibility_filtering" / "visible_fields.py",
        package_dir / "visibility_filtering" / "field_patterns.py",
        package_dir / "visibility_filtering" / "query_field_resolution.py",
    )
    forbidden_import_fragments = (
        "archive_search_fields.configuration",
        "archive_search_fields.cli",
        "import click",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
