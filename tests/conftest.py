from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "ADDRESSES_CONTRACTS",
        "ADDRESSES_MISSING_MARKER",
        "ADDRESSES_ID_VAR",
        "ADDRESSES_MAX_VERSIONS",
        "ADDRESSES_DEPLOYMENT_DIR",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def deployments(tmp_path: Path):
    """Returns a writer: write(name, address, suffix="") -> path of the record file."""
    folder = tmp_path / "deployments"
    folder.mkdir()

    def write(name: str, address: str, suffix: str = "") -> Path:
        path = folder / f"{name}{suffix}.json"
        path.write_text(json.dumps({"address": address, "abi": []}), encoding="utf-8")
        return path

    write.folder = folder
    return write
