"""Resolve paths to externally stored research data from a per-user config file."""

from resdata.errors import (
    ConfigError,
    ConfigurationNotFound,
    DataRootUnreachable,
    MalformedConfiguration,
    OutputDirectoryUnwritable,
    ResdataError,
)
from resdata.resolver import (
    PathResolver,
    get_data_path,
    get_output_path,
    get_paths,
    load_configuration,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfigurationNotFound",
    "DataRootUnreachable",
    "MalformedConfiguration",
    "OutputDirectoryUnwritable",
    "PathResolver",
    "ResdataError",
    "get_data_path",
    "get_output_path",
    "get_paths",
    "load_configuration",
]
