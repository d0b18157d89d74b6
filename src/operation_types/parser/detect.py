"""Auto-detect the flavour of an API description file."""

from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of an API description file.

    Returns: 'openapi' (3.x), 'swagger' (2.0), or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # YAML is a superset of JSON, so one loader covers both
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return "unknown"

    if isinstance(data, dict):
        if str(data.get("openapi", "")).startswith("3"):
            return "openapi"
        if "swagger" in data:
            return "swagger"

    return "unknown"
