"""Path utilities shared by the resolver and the CLI."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Iterable

PathSegment = str | os.PathLike[str]


def normalize_root(value: str | os.PathLike[str], *, base: Path, must_exist: bool) -> Path:
    """Return ``value`` as an absolute canonical path.

    ``~`` and ``$VARS`` are expanded and relative values are anchored at
    ``base``. With ``must_exist`` the path has to exist on disk, otherwise
    ``FileNotFoundError`` propagates from :meth:`Path.resolve`.
    """

    path = Path(os.path.expandvars(os.fspath(value))).expanduser()
    if not path.is_absolute():
        path = base / path
    return path.resolve(strict=must_exist)


def join_segments(root: Path, segments: Iterable[PathSegment]) -> Path:
    """Join ``segments`` onto ``root`` in order.

    Segments are trusted, so ``..`` is passed through untouched, but an
    absolute segment would replace ``root`` and is rejected.
    """

    result = root
    for segment in segments:
        part = PurePath(os.fspath(segment))
        if part.is_absolute() or part.anchor:
            raise ValueError(f"Path segment {os.fspath(segment)!r} must be relative to the configured root.")
        result = result / part
    return result


__all__ = ["PathSegment", "join_segments", "normalize_root"]
