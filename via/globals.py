# via/globals.py
from __future__ import annotations

from via.registry import AliasRegistry

__all__ = [
    "getRegistry", "setRegistry", "resetRegistry",
    "via", "p", "l", "h", "j",
]



# Process-wide default. Libraries that want isolation should hold their own AliasRegistry.
_DEFAULT_REGISTRY: AliasRegistry | None = None



def getRegistry() -> AliasRegistry:
    """Returns the process-default registry, creating it on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = AliasRegistry()
    return _DEFAULT_REGISTRY



def setRegistry(registry: AliasRegistry | None) -> None:
    """
    Replaces the process-default registry. Passing None drops it so the
    next getRegistry() starts from a fresh, empty one.
    """
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = registry



def resetRegistry() -> None:
    getRegistry().reset()



def via(dotPath: str, additionalPath: str | None = None) -> str:
    """
    Resolve against the process-default registry.

    Example:
      via("local.data.logs", "error.log") # "/srv/app/data/logs/error.log"
    """
    return getRegistry().resolve(dotPath, additionalPath)



# ----------------------------------------------
#                  Shorthands
# ----------------------------------------------

def p(dotPath: str, additionalPath: str | None = None) -> str:
    """Shorthand for via() ("p" for path)."""
    return getRegistry().resolve(dotPath, additionalPath)

def l(additionalPath: str | None = None) -> str | None:
    """Shorthand for the local root ("l" for local)."""
    return getRegistry().getLocalRoot(additionalPath)

def h(additionalPath: str | None = None) -> str | None:
    """Shorthand for the host ("h" for host)."""
    return getRegistry().getHost(additionalPath)

def j(base: str, additionalPath: str | None = None) -> str:
    """Shorthand for joining ("j" for join)."""
    return getRegistry().join(base, additionalPath)
