from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_config(project_root: Path, payload: Any = None, *, text: str | None = None, name: str = "config.yml") -> Path:
    """Write ``config/<name>`` under ``project_root`` from a mapping or raw text."""

    config_dir = project_root / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    dest = config_dir / name
    if text is None:
        text = yaml.safe_dump(payload, sort_keys=False)
    dest.write_text(text, encoding="utf-8")
    return dest


def make_project(tmp_root: Path, *, with_output: bool = False) -> tuple[Path, Path, Path]:
    """Create a project checkout, an existing data root and an output root location.

    Returns ``(project_root, data_root, output_root)``; only the data root
    exists unless ``with_output`` is set.
    """

    tmp_root = tmp_root.resolve()
    project_root = tmp_root / "project"
    data_root = tmp_root / "shared" / "testdata"
    output_root = tmp_root / "testout"

    project_root.mkdir(parents=True)
    data_root.mkdir(parents=True)
    (data_root / "foo.csv").write_text("a,b\n1,2\n", encoding="utf-8")
    if with_output:
        output_root.mkdir(parents=True)

    write_config(project_root, {"data_root": str(data_root), "output_root": str(output_root)})
    return project_root, data_root, output_root
