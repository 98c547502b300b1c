# via/core/errors.py
from __future__ import annotations
from typing import Any

__all__ = [
    "ViaError", "ConfigError", "ShapeError", "FormatError", "InvalidTypeError",
    "UnknownAliasError", "HierarchyError", "MissingBaseError",
    "AliasCollisionError", "PreconditionError", "RegistryScramError",
]



class ViaError(Exception):
    """Root of every error raised by the alias registry."""
    pass



# ----------------------------------------------
#               Configuration
# ----------------------------------------------

class ConfigError(ViaError, ValueError):
    """Raised when a configuration record cannot be applied."""
    pass



class ShapeError(ConfigError):
    """
    Registration-list entry is neither the positional nor the named shape.
    `entry` holds the offending raw value.
    """
    def __init__(self, message: str, *, entry: Any = None) -> None:
        super().__init__(message)
        self.entry = entry



class MissingBaseError(ViaError, ValueError):
    def __init__(self, baseAlias: str) -> None:
        super().__init__(f"Base alias '{baseAlias}' does not exist")
        self.baseAlias = baseAlias



class AliasCollisionError(ViaError, ValueError):
    """Same alias used as both a base and an assignment."""
    _ARTICLES = {"base": "a base", "assignment": "an assignment"}

    def __init__(self, alias: str, *, existing: str) -> None:
        attempted = "assignment" if existing == "base" else "base"
        super().__init__(
            f"Alias '{alias}' is already registered as {self._ARTICLES[existing]} "
            f"and cannot also be {self._ARTICLES[attempted]}"
        )
        self.alias = alias
        self.existing = existing



# ----------------------------------------------
#                 Resolution
# ----------------------------------------------

class FormatError(ViaError, ValueError):
    def __init__(self, dotPath: str) -> None:
        super().__init__(
            f"Path '{dotPath}' must contain at least type and alias (e.g., \"rel.data\")"
        )
        self.dotPath = dotPath



class InvalidTypeError(ViaError, ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid path type '{token}'. Must be 'rel', 'local', or 'host'")
        self.token = token



class UnknownAliasError(ViaError, ValueError):
    def __init__(self, alias: str) -> None:
        super().__init__(
            f"Alias '{alias}' must be a base. Assignments must be accessed via base.assignment format"
        )
        self.alias = alias



class HierarchyError(ViaError, ValueError):
    """A sub-segment is neither an assignment nor a nested base under the current node."""
    def __init__(self, segment: str, currentNode: str) -> None:
        super().__init__(f"Path segment '{segment}' not found as assignment under '{currentNode}'")
        self.segment = segment
        self.currentNode = currentNode



class PreconditionError(ViaError, RuntimeError):
    """Requested `local`/`host` resolution while the local root or host is unset."""
    def __init__(self, message: str, *, requirement: str) -> None:
        super().__init__(message)
        self.requirement = requirement



class RegistryScramError(ViaError, RuntimeError):
    """Raised when the registry violates one of its own invariants."""
    pass
