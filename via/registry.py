# via/registry.py
from __future__ import annotations
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any
import logging

from via.core.dotpath import DotPath, PathType, parseDotPath
from via.core.errors import (
    AliasCollisionError,
    ConfigError,
    HierarchyError,
    MissingBaseError,
    PreconditionError,
    RegistryScramError,
    UnknownAliasError,
    ViaError,
)
from via.core.pathnorm import canonicalize, join, joinOptional
from via.entries import ViaConfig, parseAssignmentEntry, parseBaseEntry

logger = logging.getLogger(__name__)

__all__ = ["Assignment", "AliasRegistry"]



@dataclass(frozen=True)
class Assignment:
    """
    Named sub-path under a base.
      - targetPath: canonical base path joined with relativePath
      - relativePath: as registered (not canonicalized)
    """
    alias: str
    targetPath: str
    baseAlias: str
    relativePath: str



class AliasRegistry:
    """
    Holds the local root, host, bases and assignments, and resolves
    dot-paths like "rel.data.logs" against them.

    Single-writer: configure once, then resolve from anywhere. There is no
    locking; mutating from several threads at once is not supported.
    """
    def __init__(self) -> None:
        self._localRoot: str | None = None
        self._host: str | None = None
        self._bases: dict[str, str] = {}
        self._assignments: dict[str, Assignment] = {}

    # ----- Lifecycle -----

    def reset(self) -> None:
        """Drop everything back to the empty state."""
        self._localRoot = None
        self._host = None
        self._bases = {}
        self._assignments = {}
        logger.debug("Alias registry reset")

    def initialize(self, config: ViaConfig | Mapping[str, Any]) -> None:
        """Applies localRoot, host, bases, assignments in that order, skipping absent fields."""
        cfg = ViaConfig.fromMapping(config)
        if cfg.localRoot is not None:
            self.setLocalRoot(cfg.localRoot)
        if cfg.host is not None:
            self.setHost(cfg.host)
        if cfg.bases is not None:
            self.setBases(cfg.bases)
        if cfg.assignments is not None:
            self.assignToBases(cfg.assignments)

    # ----- Local root / host -----

    def setLocalRoot(self, path: str) -> None:
        self._localRoot = canonicalize(path)
        logger.debug("Local root set: %s", self._localRoot)

    def getLocalRoot(self, additionalPath: str | None = None) -> str | None:
        if self._localRoot is None:
            return None
        return joinOptional(self._localRoot, additionalPath)

    def setHost(self, host: str) -> None:
        # Hosts are opaque authorities, not filesystem paths: stored verbatim
        self._host = host
        logger.debug("Host set: %s", host)

    def getHost(self, additionalPath: str | None = None) -> str | None:
        if self._host is None:
            return None
        return joinOptional(self._host, additionalPath)

    # ----- Bases -----

    def setBase(self, alias: str, path: str) -> None:
        if self.hasAssignment(alias):
            raise AliasCollisionError(alias, existing="assignment")
        self._bases[alias] = canonicalize(path)
        logger.debug("Base registered: %s -> %s", alias, self._bases[alias])

    def setBases(self, bases: Iterable[Any]) -> None:
        """Each entry is (alias, path) or {"alias": ..., "path": ...}."""
        for raw in bases:
            entry = parseBaseEntry(raw)
            self.setBase(entry.alias, entry.path)

    def hasBase(self, alias: str) -> bool:
        return alias in self._bases

    def bases(self) -> dict[str, str]:
        return dict(self._bases)

    # ----- Assignments -----

    def assignToBase(self, alias: str, path: str, baseAlias: str) -> None:
        basePath = self._bases.get(baseAlias)
        if basePath is None:
            raise MissingBaseError(baseAlias)
        if alias in self._bases:
            raise AliasCollisionError(alias, existing="base")
        if not alias or "." in alias:
            # The walk splits on "." so such an alias could never be reached
            raise ConfigError(f"Assignment alias '{alias}' must be a non-empty name without '.'")

        self._assignments[alias] = Assignment(
            alias=alias,
            targetPath=joinOptional(basePath, path),
            baseAlias=baseAlias,
            relativePath=path,
        )
        logger.debug("Assignment registered: %s.%s -> %s", baseAlias, alias, self._assignments[alias].targetPath)

    def assignToBases(self, assignments: Iterable[Any]) -> None:
        """Each entry is (alias, path, baseAlias) or the equivalent named mapping."""
        for raw in assignments:
            entry = parseAssignmentEntry(raw)
            self.assignToBase(entry.alias, entry.path, entry.baseAlias)

    def hasAssignment(self, alias: str) -> bool:
        return alias in self._assignments

    def assignments(self) -> dict[str, Assignment]:
        return dict(self._assignments)

    # ----- Resolution -----

    def resolve(self, dotPath: str, additionalPath: str | None = None) -> str:
        """
        Resolves "type.base[.segment...]" to a path string.

        Examples (base data -> "data", assignment logs -> "logs" under data):
          resolve("rel.data.logs")          -> "/data/logs"
          resolve("local.data.logs")        -> "<localRoot>/data/logs"
          resolve("host.data", "x.css")     -> "//<host>/data/x.css"
        """
        try:
            parsed = parseDotPath(dotPath)
            relativePath = self._walk(parsed, additionalPath)
            return self._render(parsed.kind, relativePath)
        except ViaError as err:
            logger.debug("Failed to resolve '%s': %s", dotPath, err)
            raise

    def join(self, base: str, additionalPath: str | None) -> str:
        return joinOptional(base, additionalPath)

    def _walk(self, parsed: DotPath, additionalPath: str | None) -> str:
        if parsed.rootAlias not in self._bases:
            raise UnknownAliasError(parsed.rootAlias)

        currentNode = parsed.rootAlias
        for part in parsed.subParts:
            assignment = self._assignments.get(part)
            if assignment is not None and assignment.baseAlias == currentNode:
                currentNode = part
                continue
            # Dotted base names ("data.archive") nest under their prefix
            nextAlias = f"{currentNode}.{part}"
            if nextAlias in self._bases:
                currentNode = nextAlias
                continue
            raise HierarchyError(part, currentNode)

        return joinOptional(self._relativePathOf(currentNode), additionalPath)

    def _relativePathOf(self, node: str) -> str:
        """Root-anchored path of a base or assignment alias."""
        assignment = self._assignments.get(node)
        if assignment is not None:
            basePath = self._bases.get(assignment.baseAlias)
            if basePath is None:
                raise RegistryScramError(
                    f"Assignment '{node}' points at base '{assignment.baseAlias}' which is not registered"
                )
            return joinOptional(joinOptional("/", basePath), assignment.relativePath)
        return joinOptional("/", self._bases[node])

    def _render(self, kind: PathType, relativePath: str) -> str:
        if kind == "rel":
            return relativePath
        if kind == "local":
            if self._localRoot is None:
                raise PreconditionError("Local root not set. Call setLocalRoot() first.", requirement="localRoot")
            return join(self._localRoot, relativePath.lstrip("/"))
        if kind == "host":
            if self._host is None:
                raise PreconditionError("Host not set. Call setHost() first.", requirement="host")
            return "//" + self._host + relativePath
        raise RegistryScramError(f"Invalid type '{kind}' reached rendering")

    # ----- Introspection -----

    def listAll(self) -> dict[str, dict[str, str]]:
        """
        Every base (keyed by alias) and assignment (keyed by "baseAlias.alias")
        with its "rel" path, plus "local"/"host" when those are configured.
        Bases first, then assignments, each in registration order.
        """
        result: dict[str, dict[str, str]] = {}
        for alias in self._bases:
            result[alias] = self._describe(self._relativePathOf(alias))
        for alias, assignment in self._assignments.items():
            result[f"{assignment.baseAlias}.{alias}"] = self._describe(self._relativePathOf(alias))
        return result

    def _describe(self, relativePath: str) -> dict[str, str]:
        entry = {"rel": relativePath}
        if self._localRoot is not None:
            entry["local"] = self._render("local", relativePath)
        if self._host is not None:
            entry["host"] = self._render("host", relativePath)
        return entry
