# via/entries.py
from __future__ import annotations
from typing import Any, TypeVar
from collections.abc import Mapping, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from via.core.errors import ConfigError, ShapeError

__all__ = [
    "BaseEntry", "AssignmentEntry", "LoggingSettings", "ViaConfig",
    "parseBaseEntry", "parseAssignmentEntry",
]



class BaseEntry(BaseModel):
    """Named shape of a base registration: {alias, path}."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    alias: str
    path: str



class AssignmentEntry(BaseModel):
    """Named shape of an assignment registration: {alias, path, baseAlias}."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    alias: str
    path: str
    baseAlias: str



class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")
    devMode: bool = True
    file: str | None = None
    suppressRecurring: bool = False



class ViaConfig(BaseModel):
    """
    Top-level init record. Every field is optional and applied in the fixed
    order localRoot → host → bases → assignments.

    Entries in `bases`/`assignments` stay raw here; their positional/named
    shape is decided by parseBaseEntry/parseAssignmentEntry so a bad entry
    surfaces as ShapeError rather than a pydantic ValidationError.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    localRoot: str | None = Field(default=None, validation_alias=AliasChoices("localRoot", "Local"))
    host: str | None = Field(default=None, validation_alias=AliasChoices("host", "absoluteDomain"))
    bases: list[Any] | None = None
    assignments: list[Any] | None = None
    logging: LoggingSettings | None = None

    @classmethod
    def fromMapping(cls, data: Any) -> ViaConfig:
        if isinstance(data, ViaConfig):
            return data
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as err:
            raise ConfigError(f"Invalid config: {err}") from err



# ----------------------------------------------
#             Positional | named parsing
# ----------------------------------------------

_EntryT = TypeVar("_EntryT", BaseEntry, AssignmentEntry)



def _isPositional(raw: Any) -> bool:
    return isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray))



def _parseEntry(raw: Any, model: type[_EntryT], fields: tuple[str, ...], hint: str) -> _EntryT:
    if isinstance(raw, model):
        return raw

    values: list[Any] | None = None
    if _isPositional(raw):
        if len(raw) == len(fields):
            values = list(raw)
    elif isinstance(raw, Mapping):
        if all(name in raw for name in fields):
            values = [raw[name] for name in fields]

    if values is None or not all(isinstance(value, str) for value in values):
        raise ShapeError(f"{hint}, got {raw!r}", entry=raw)
    return model(**dict(zip(fields, values)))



def parseBaseEntry(raw: Any) -> BaseEntry:
    """Accepts BaseEntry, [alias, path] or {"alias": ..., "path": ...}."""
    return _parseEntry(
        raw, BaseEntry, ("alias", "path"),
        'Each base must have "alias" and "path" keys or be a positional array [alias, path]',
    )



def parseAssignmentEntry(raw: Any) -> AssignmentEntry:
    """Accepts AssignmentEntry, [alias, path, baseAlias] or the named mapping."""
    return _parseEntry(
        raw, AssignmentEntry, ("alias", "path", "baseAlias"),
        'Each assignment must have "alias", "path", and "baseAlias" keys '
        'or be a positional array [alias, path, baseAlias]',
    )
