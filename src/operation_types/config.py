"""Generator settings, loadable from a YAML file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from operation_types.errors import ConfigError


class GeneratorConfig(BaseModel):
    """Options shared by every operation of a generation run."""

    context_type_name: str = "Context"
    with_context_type: bool = False
    injected_headers: list[str] = []  # headers the runtime fills in (auth, tracing...)


def load_config(file_path: Path) -> GeneratorConfig:
    """Read a GeneratorConfig from YAML. An empty file gives the defaults."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping at the top level")

    try:
        return GeneratorConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{file_path}: {e}") from e
