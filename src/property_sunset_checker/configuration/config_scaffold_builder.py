"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "sunset-policy.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Sunset policy configuration for property-sunset-checker.
# Every section is optional; removing a section restores its defaults.

policy:
  # Required advance notice (days) before a deprecated property may be removed.
  # Properties whose stability level is not listed here are not reported.
  # A level with 0 days does not require a sunset date.
  stability_levels:
    draft: 0
    alpha: 0
    beta: 31
    stable: 180
  # Extension keys read from the revision version of each property.
  stability_extension: "x-stability-level"
  sunset_extension: "x-sunset"
  # Maximum nesting depth walked before a branch is abandoned.
  max_depth: 64

# Severity per check id (info, warning or error).
severity:
  property-deprecated: info
  property-deprecated-sunset-missing: error
  property-deprecated-sunset-parse: error
  # request-property-deprecated-sunset-missing: warning
  # response-property-reactivated: info
"""


def build_placeholder_configuration() -> str:
    """Build a YAML policy configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the policy configuration template to the requested output path.

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
        raise FileExistsError(f"Policy configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
