# via/__init__.py
from __future__ import annotations

from via.core.errors import (
    AliasCollisionError,
    ConfigError,
    FormatError,
    HierarchyError,
    InvalidTypeError,
    MissingBaseError,
    PreconditionError,
    RegistryScramError,
    ShapeError,
    UnknownAliasError,
    ViaError,
)
from via.core.pathnorm import canonicalize, join
from via.entries import AssignmentEntry, BaseEntry, ViaConfig
from via.globals import getRegistry, h, j, l, p, resetRegistry, setRegistry, via
from via.registry import AliasRegistry, Assignment

__all__ = [
    "AliasRegistry",
    "Assignment",
    "BaseEntry",
    "AssignmentEntry",
    "ViaConfig",
    "canonicalize",
    "join",
    "getRegistry",
    "setRegistry",
    "resetRegistry",
    "via",
    "p",
    "l",
    "h",
    "j",
    "ViaError",
    "ConfigError",
    "ShapeError",
    "FormatError",
    "InvalidTypeError",
    "UnknownAliasError",
    "HierarchyError",
    "MissingBaseError",
    "AliasCollisionError",
    "PreconditionError",
    "RegistryScramError",
]
