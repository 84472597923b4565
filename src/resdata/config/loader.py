"""Config loading entry points for resdata."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from resdata.errors import ConfigError, ConfigurationNotFound, MalformedConfiguration

from .models import ResearchPathsConfig

PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIRNAME = "config"
CONFIG_FILENAME = "config.yml"
TEMPLATE_FILENAME = "config.template.yml"

PROJECT_ROOT_ENV = "RESDATA_PROJECT_ROOT"
DATA_ROOT_ENV = "RESDATA_DATA_ROOT"
OUTPUT_ROOT_ENV = "RESDATA_OUTPUT_ROOT"

TEMPLATE_VALUES: dict[str, str] = {
    "data_root": "/path/to/shared/drive/project_data",
    "output_root": "~/project_outputs",
}

_TEMPLATE_HEADER = (
    "# Copy this file to config.yml and replace the placeholder paths.\n"
    "# config.yml is personal and must never be committed.\n"
    "#\n"
    "# data_root:   existing folder holding the external (read-only) data,\n"
    "#              e.g. a mounted network share.\n"
    "# output_root: folder for generated outputs; created on demand.\n"
)

logger = logging.getLogger(__name__)


def resolve_project_root(project_root: str | os.PathLike[str] | None = None) -> Path:
    """Return the project root: explicit argument, then environment, then checkout root."""

    if project_root is not None:
        return Path(project_root).expanduser().resolve()
    env_root = os.getenv(PROJECT_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()
    return PROJECT_ROOT


def config_path_for(project_root: str | os.PathLike[str] | None = None) -> Path:
    """Return the location of the personal config file under ``project_root``."""

    return resolve_project_root(project_root) / CONFIG_DIRNAME / CONFIG_FILENAME


def template_path_for(project_root: str | os.PathLike[str] | None = None) -> Path:
    """Return the location of the committed config template under ``project_root``."""

    return resolve_project_root(project_root) / CONFIG_DIRNAME / TEMPLATE_FILENAME


def load_config(
    path: Path | None = None,
    *,
    project_root: str | os.PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ResearchPathsConfig:
    """Load the paths configuration applying optional overrides.

    ``path`` defaults to ``<project_root>/config/config.yml``. Values from
    ``overrides`` win over the file, and the ``RESDATA_DATA_ROOT`` /
    ``RESDATA_OUTPUT_ROOT`` environment variables win over both.
    """

    config_path = Path(path) if path is not None else config_path_for(project_root)
    if not config_path.exists():
        template = config_path.with_name(TEMPLATE_FILENAME)
        raise ConfigurationNotFound(
            f"{config_path.name} not found at {config_path}.\n"
            f"Copy {template} to {config_path} and fill in your paths "
            "(or run `resdata init`)."
        )

    logger.debug("Loading paths config from %s", config_path)
    config_data = _expect_mapping(_read_structured_file(config_path), config_path)

    if overrides:
        config_data = {**config_data, **overrides}
    config_data.update(_env_overrides())

    if "data_root" not in config_data:
        raise MalformedConfiguration(f"Config file {config_path} is missing the 'data_root' entry.")

    try:
        return ResearchPathsConfig.model_validate(config_data)
    except ValidationError as exc:
        raise MalformedConfiguration(f"Invalid paths config in {config_path}:\n{exc}") from exc


def write_config_template(dest: Path) -> None:
    """Write a placeholder config to ``dest`` with the same schema as ``config.yml``."""

    suffix = dest.suffix.lower()
    if suffix not in {".yml", ".yaml", ".json"}:
        raise ConfigError(f"Template export supports YAML or JSON destinations, not {dest.name}.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        dest.write_text(json.dumps(TEMPLATE_VALUES, indent=2), encoding="utf-8")
        return
    dest.write_text(
        _TEMPLATE_HEADER + yaml.safe_dump(TEMPLATE_VALUES, sort_keys=False),
        encoding="utf-8",
    )


def init_config(project_root: str | os.PathLike[str] | None = None, *, force: bool = False) -> Path:
    """Create ``config/config.yml`` from the committed template and return its path.

    Falls back to the built-in placeholders when the project has no template.
    An existing config is left untouched unless ``force`` is set.
    """

    dest = config_path_for(project_root)
    if dest.exists() and not force:
        raise ConfigError(f"{dest} already exists; pass force=True to overwrite it.")

    template = template_path_for(project_root)
    if template.exists():
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(template, dest)
    else:
        write_config_template(dest)
    logger.info("Wrote %s; edit it to point at your data", dest)
    return dest


def _env_overrides() -> dict[str, str]:
    result: dict[str, str] = {}
    for key, env_name in (("data_root", DATA_ROOT_ENV), ("output_root", OUTPUT_ROOT_ENV)):
        value = os.getenv(env_name)
        if value:
            logger.debug("Using %s from $%s", key, env_name)
            result[key] = value
    return result


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise MalformedConfiguration(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".toml", ".json"}:
        raise MalformedConfiguration(f"Unsupported config format for {path}")

    try:
        text = path.read_text(encoding="utf-8")
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text)
        if suffix == ".toml":
            return tomllib.loads(text)
        return json.loads(text)
    except OSError as exc:
        raise MalformedConfiguration(f"Could not read {path}: {exc}") from exc
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedConfiguration(f"Could not parse {path}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "PROJECT_ROOT",
    "TEMPLATE_FILENAME",
    "config_path_for",
    "init_config",
    "load_config",
    "resolve_project_root",
    "template_path_for",
    "write_config_template",
]
