# tests/via/test_globals.py
from __future__ import annotations

import pytest

import via
from via.core.errors import PreconditionError
from via.globals import getRegistry, h, j, l, p, resetRegistry, setRegistry
from via.registry import AliasRegistry


def test_getRegistry_isStableUntilReplaced(defaultRegistry: AliasRegistry) -> None:
    assert getRegistry() is defaultRegistry
    assert getRegistry() is getRegistry()


def test_setRegistry_noneStartsFresh(defaultRegistry: AliasRegistry) -> None:
    defaultRegistry.setBase("data", "data")
    setRegistry(None)
    fresh = getRegistry()
    assert fresh is not defaultRegistry
    assert not fresh.hasBase("data")


def test_via_resolvesAgainstDefaultRegistry(defaultRegistry: AliasRegistry) -> None:
    defaultRegistry.initialize({
        "localRoot": "/srv/app",
        "bases": [["data", "data"]],
        "assignments": [["logs", "logs", "data"]],
    })
    assert via.via("rel.data.logs") == "/data/logs"
    assert via.via("local.data.logs", "error.log") == "/srv/app/data/logs/error.log"
    assert p("local.data.logs", "error.log") == via.via("local.data.logs", "error.log")


def test_shorthands(defaultRegistry: AliasRegistry) -> None:
    assert l() is None
    assert h() is None

    defaultRegistry.setLocalRoot("/test/project")
    defaultRegistry.setHost("test.example.com")
    assert l() == "/test/project"
    assert h() == "test.example.com"
    assert l("data/uploads") == "/test/project/data/uploads"
    assert h("assets/css") == "test.example.com/assets/css"
    assert j("/base/path", "sub/../final/") == "/base/path/final"
    assert j("/", None) == "/"


def test_resetRegistry_clearsDefault(defaultRegistry: AliasRegistry) -> None:
    defaultRegistry.setBase("data", "data")
    resetRegistry()
    assert getRegistry() is defaultRegistry
    assert defaultRegistry.bases() == {}
    defaultRegistry.setBase("data", "data")
    with pytest.raises(PreconditionError):
        p("local.data")
