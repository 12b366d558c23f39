"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "search-fields.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Search field configuration for archive-search-fields.
# Replace every <REQUIRED> placeholder before running query-fields.
# Replace <OPTIONAL> placeholders only when your setup needs them.

mappings:
  # Provide either an index mappings file path or inline mappings.
  path: "<REQUIRED>"
  # inline:
  #   informationObject:
  #     properties: {}

settings:
  # Enabled cultures, in display order.
  i18n_languages:
    - "<REQUIRED>"
  # Elements hidden from public users are set to false.
  element_visibility:
    isad_archival_history: true
  # Default description template per record type (isad, rad, ...).
  default_template:
    informationobject: "<OPTIONAL>"

# Additional templates; entries replace built-in templates of the same name.
# templates:
#   dacs:
#     dacs_notes: ["i18n.%s.notes"]
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
