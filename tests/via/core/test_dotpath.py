# tests/via/core/test_dotpath.py
from __future__ import annotations

import pytest

from via.core.dotpath import DotPath, parseDotPath
from via.core.errors import FormatError, InvalidTypeError, ViaError


def test_parseDotPath_splitsTypeRootAndSubParts() -> None:
    parsed = parseDotPath("rel.data.logs.archive")
    assert parsed == DotPath(raw="rel.data.logs.archive", kind="rel", rootAlias="data", subParts=("logs", "archive"))
    assert str(parsed) == "rel.data.logs.archive"


def test_parseDotPath_twoSegmentsHasNoSubParts() -> None:
    parsed = parseDotPath("host.data")
    assert parsed.kind == "host"
    assert parsed.rootAlias == "data"
    assert parsed.subParts == ()


@pytest.mark.parametrize("raw", ["", "rel", "invalid"])
def test_parseDotPath_tooFewSegments_raisesFormatError(raw: str) -> None:
    with pytest.raises(FormatError) as excInfo:
        parseDotPath(raw)
    assert excInfo.value.dotPath == raw
    assert "at least type and alias" in str(excInfo.value)


def test_parseDotPath_unknownType_namesToken() -> None:
    with pytest.raises(InvalidTypeError) as excInfo:
        parseDotPath("invalid.type.alias")
    assert excInfo.value.token == "invalid"
    assert "'invalid'" in str(excInfo.value)


def test_parseDotPath_typeIsCaseSensitive() -> None:
    with pytest.raises(InvalidTypeError):
        parseDotPath("REL.data")


def test_parseDotPath_keepsEmptySegments() -> None:
    parsed = parseDotPath("rel..data")
    assert parsed.rootAlias == ""
    assert parsed.subParts == ("data",)


def test_errors_areValueErrorsAndViaErrors() -> None:
    with pytest.raises(ValueError):
        parseDotPath("nope")
    with pytest.raises(ViaError):
        parseDotPath("bad.alias")
