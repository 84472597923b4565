"""Configuration models and loaders for resdata."""

from resdata.errors import ConfigError

from .loader import (
    CONFIG_FILENAME,
    PROJECT_ROOT,
    TEMPLATE_FILENAME,
    config_path_for,
    init_config,
    load_config,
    resolve_project_root,
    template_path_for,
    write_config_template,
)
from .models import ResearchPathsConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "PROJECT_ROOT",
    "ResearchPathsConfig",
    "TEMPLATE_FILENAME",
    "config_path_for",
    "init_config",
    "load_config",
    "resolve_project_root",
    "template_path_for",
    "write_config_template",
]
