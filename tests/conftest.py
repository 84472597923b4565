from __future__ import annotations

import pytest

from resdata.config.loader import DATA_ROOT_ENV, OUTPUT_ROOT_ENV, PROJECT_ROOT_ENV


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch) -> None:
    """Keep a developer's own RESDATA_* variables out of the tests."""

    for name in (PROJECT_ROOT_ENV, DATA_ROOT_ENV, OUTPUT_ROOT_ENV):
        monkeypatch.delenv(name, raising=False)
