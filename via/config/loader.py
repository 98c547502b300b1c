# via/config/loader.py
from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
import logging

import json5

from via.core.errors import ConfigError
from via.entries import ViaConfig
from via.registry import AliasRegistry

logger = logging.getLogger(__name__)

__all__ = ["loadConfigFile", "loadRegistry"]



def loadConfigFile(path: Path | str) -> ViaConfig:
    """
    Reads a JSON5 registry config.

    Example file:
        {
          localRoot: "/srv/app",
          host: "example.com",
          bases: [["data", "data"], {alias: "src", path: "src"}],
          assignments: [["logs", "logs", "data"]],
        }

    Raises:
        FileNotFoundError: if the file is missing or is not a regular file
        ConfigError: if the file does not parse or its root is not an object
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file '{path}' not found")

    try:
        with path.open("r", encoding="utf-8") as file:
            data = json5.load(file)
    except ValueError as err:
        raise ConfigError(f"Config file '{path}' could not be parsed: {err}") from err

    if not isinstance(data, Mapping):
        raise ConfigError(f"Config file '{path}' must contain an object at the top level")

    logger.debug("Loaded registry config from %s", path)
    return ViaConfig.fromMapping(data)



def loadRegistry(path: Path | str, registry: AliasRegistry | None = None) -> AliasRegistry:
    """Loads `path` and applies it to `registry` (a fresh one when omitted)."""
    config = loadConfigFile(path)
    registry = registry if registry is not None else AliasRegistry()
    registry.initialize(config)
    return registry
