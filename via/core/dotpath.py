# via/core/dotpath.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, cast

from .errors import FormatError, InvalidTypeError

__all__ = ["PathType", "PATH_TYPES", "DotPath", "parseDotPath"]



PathType = Literal["rel", "local", "host"]
PATH_TYPES: tuple[str, ...] = ("rel", "local", "host")



@dataclass(frozen=True)
class DotPath:
    """
    Tokenized `type.alias[.segment...]` address.
      - kind: which representation to produce
      - rootAlias: entry point, must be a registered base
      - subParts: remaining segments, walked left to right
    """
    raw: str
    kind: PathType
    rootAlias: str
    subParts: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.raw



def parseDotPath(raw: str) -> DotPath:
    """
    Splits on "." only. Empty segments (e.g. "rel..data") survive tokenizing
    and are rejected by the registry walk as unknown aliases.

    Raises:
        FormatError: fewer than two segments
        InvalidTypeError: first segment is not rel/local/host
    """
    parts = raw.split(".")
    if len(parts) < 2:
        raise FormatError(raw)

    kind, rootAlias, *subParts = parts
    if kind not in PATH_TYPES:
        raise InvalidTypeError(kind)

    return DotPath(raw=raw, kind=cast(PathType, kind), rootAlias=rootAlias, subParts=tuple(subParts))
