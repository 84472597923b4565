"""Resolve paths to external research data and local outputs.

The per-user ``config/config.yml`` names two roots:

``data_root``
    Existing (often network-mounted) folder that holds the raw data. It is
    only ever read from, and it must exist when the config is loaded.
``output_root``
    Folder for anything the project writes. It may not exist yet; missing
    directories are created by :func:`get_output_path`.

Every module-level call reloads the config, so edits to the file apply to
the next call. :class:`PathResolver` offers an opt-in cache keyed on the
file's modification time for callers that resolve many paths in a loop.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from resdata.config.loader import config_path_for, load_config, resolve_project_root
from resdata.config.models import ResearchPathsConfig
from resdata.errors import DataRootUnreachable, MalformedConfiguration, OutputDirectoryUnwritable
from resdata.util.paths import PathSegment, join_segments, normalize_root

DEFAULT_OUTPUT_DIRNAME = "outputs"

logger = logging.getLogger(__name__)


class PathResolver:
    """Load the paths config for one project and build paths from it."""

    def __init__(
        self,
        project_root: str | os.PathLike[str] | None = None,
        *,
        config_path: str | os.PathLike[str] | None = None,
        cache: bool = False,
    ) -> None:
        self.project_root = resolve_project_root(project_root)
        self.config_path = Path(config_path) if config_path is not None else config_path_for(self.project_root)
        self.cache = cache
        self._cached: Optional[ResearchPathsConfig] = None
        self._cached_stamp: Optional[tuple[int, int]] = None

    def load(self) -> ResearchPathsConfig:
        """Return the config with ``data_root`` and ``output_root`` made absolute and canonical."""

        stamp = self._stamp()
        if self.cache and self._cached is not None and stamp is not None and stamp == self._cached_stamp:
            return self._cached

        raw = load_config(self.config_path, project_root=self.project_root)
        config = self._normalize(raw)

        if self.cache:
            self._cached = config
            self._cached_stamp = stamp
        return config

    def invalidate(self) -> None:
        """Drop any cached config so the next call rereads the file."""

        self._cached = None
        self._cached_stamp = None

    def data_path(self, *segments: PathSegment) -> Path:
        """Return ``data_root`` joined with ``segments``; the result need not exist."""

        return join_segments(self.load().data_root, segments)

    def output_path(self, *segments: PathSegment) -> Path:
        """Return ``output_root`` joined with ``segments``, creating its parent directory.

        With no segments the output root itself is created and returned.
        """

        path = join_segments(self.load().output_root, segments)
        _ensure_directory(path.parent if segments else path)
        return path

    def _normalize(self, config: ResearchPathsConfig) -> ResearchPathsConfig:
        try:
            data_root = normalize_root(config.data_root, base=self.project_root, must_exist=True)
        except (OSError, RuntimeError) as exc:
            raise DataRootUnreachable(
                f"data_root {str(config.data_root)!r} from {self.config_path} does not exist.\n"
                "Check the path in your config and that the shared/network drive is connected."
            ) from exc

        output_value = config.output_root if config.output_root is not None else Path(DEFAULT_OUTPUT_DIRNAME)
        try:
            output_root = normalize_root(output_value, base=self.project_root, must_exist=False)
        except (OSError, RuntimeError) as exc:
            raise MalformedConfiguration(
                f"output_root {str(output_value)!r} from {self.config_path} cannot be resolved: {exc}"
            ) from exc

        logger.debug("Resolved data_root=%s output_root=%s", data_root, output_root)
        return config.model_copy(update={"data_root": data_root, "output_root": output_root})

    def _stamp(self) -> Optional[tuple[int, int]]:
        try:
            stat = self.config_path.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryUnwritable(f"Could not create output directory {directory}: {exc}") from exc
    logger.debug("Output directory ready: %s", directory)


def load_configuration(project_root: str | os.PathLike[str] | None = None) -> ResearchPathsConfig:
    """Load and validate the paths config, normalizing both roots."""

    return PathResolver(project_root).load()


get_paths = load_configuration


def get_data_path(*segments: PathSegment, project_root: str | os.PathLike[str] | None = None) -> Path:
    """Build a path under ``data_root``. Existence of the result is not checked."""

    return PathResolver(project_root).data_path(*segments)


def get_output_path(*segments: PathSegment, project_root: str | os.PathLike[str] | None = None) -> Path:
    """Build a path under ``output_root`` and make sure its parent directory exists."""

    return PathResolver(project_root).output_path(*segments)


__all__ = [
    "DEFAULT_OUTPUT_DIRNAME",
    "PathResolver",
    "get_data_path",
    "get_output_path",
    "get_paths",
    "load_configuration",
]
