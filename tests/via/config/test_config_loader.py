# tests/via/config/test_config_loader.py
from __future__ import annotations
from pathlib import Path

import json5
import pytest

from via.config.loader import loadConfigFile, loadRegistry
from via.core.errors import ConfigError, MissingBaseError
from via.registry import AliasRegistry


def write_config(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_loadConfigFile_json5Syntax(tmp_path: Path) -> None:
    cfg = loadConfigFile(write_config(tmp_path / "via.json5", """
        // comments and trailing commas are fine
        {
          localRoot: "/srv/app",
          host: 'example.com',
          bases: [["data", "data"], {alias: "src", path: "src"},],
          assignments: [["logs", "logs", "data"]],
        }
    """))
    assert cfg.localRoot == "/srv/app"
    assert cfg.host == "example.com"
    assert cfg.bases == [["data", "data"], {"alias": "src", "path": "src"}]
    assert cfg.assignments == [["logs", "logs", "data"]]


def test_loadConfigFile_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        loadConfigFile(tmp_path / "nope.json5")
    with pytest.raises(FileNotFoundError):
        loadConfigFile(tmp_path)


def test_loadConfigFile_parseError(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        loadConfigFile(write_config(tmp_path / "bad.json5", "{ bases: [ }"))


def test_loadConfigFile_rootMustBeObject(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        loadConfigFile(write_config(tmp_path / "list.json5", json5.dumps([1, 2])))


def test_loadRegistry_buildsFreshRegistry(tmp_path: Path) -> None:
    path = write_config(tmp_path / "via.json5", json5.dumps({
        "Local": "/Users/me/app",
        "bases": [["data", "data"]],
        "assignments": [["logs", "logs", "data"]],
    }))
    registry = loadRegistry(path)
    assert registry.resolve("local.data.logs") == "/Users/me/app/data/logs"


def test_loadRegistry_appliesOntoGivenRegistry(tmp_path: Path) -> None:
    existing = AliasRegistry()
    existing.setBase("data", "data")
    path = write_config(tmp_path / "via.json5", '{assignments: [["logs", "logs", "data"]]}')
    assert loadRegistry(path, existing) is existing
    assert existing.resolve("rel.data.logs") == "/data/logs"


def test_loadRegistry_propagatesRegistrationErrors(tmp_path: Path) -> None:
    path = write_config(tmp_path / "via.json5", '{assignments: [["logs", "logs", "data"]]}')
    with pytest.raises(MissingBaseError):
        loadRegistry(path)
