"""Error taxonomy for resdata path resolution."""

from __future__ import annotations


class ResdataError(RuntimeError):
    """Base class for every failure raised by resdata."""


class ConfigError(ResdataError):
    """Raised when configuration files cannot be loaded or validated."""


class ConfigurationNotFound(ConfigError):
    """The per-user configuration file does not exist."""


class MalformedConfiguration(ConfigError):
    """The configuration file cannot be parsed or lacks required entries."""


class DataRootUnreachable(ConfigError):
    """The configured data root does not resolve to an existing location."""


class OutputDirectoryUnwritable(ResdataError):
    """A directory under the output root could not be created."""


__all__ = [
    "ConfigError",
    "ConfigurationNotFound",
    "DataRootUnreachable",
    "MalformedConfiguration",
    "OutputDirectoryUnwritable",
    "ResdataError",
]
