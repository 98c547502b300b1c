# via/core/pathnorm.py
from __future__ import annotations

__all__ = ["canonicalize", "join", "joinOptional", "splitRoot"]



# ----------------------------------------------
#                 root handling
# ----------------------------------------------

def _isDrive(part: str) -> bool:
    return len(part) == 2 and part[0].isalpha() and part[1] == ":"



def splitRoot(path: str) -> tuple[str, str]:
    """
    Splits an already slash-normalized path into (root, remainder).

    Roots recognised:
      • scheme prefix       "phar://"  (combined with whatever root follows it)
      • leading slash       "/"
      • Windows drive       "C:" or "C:/" → "C:/"
    """
    scheme = ""
    if "://" in path:
        scheme, path = path.split("://", 1)
        scheme += "://"

    if not path:
        return scheme, ""

    if path[0] == "/":
        return scheme + "/", path[1:]

    if _isDrive(path[:2]):
        if len(path) == 2:
            return scheme + path + "/", ""
        if path[2] == "/":
            return scheme + path[:3], path[3:]

    return scheme, path



def _canonicalParts(root: str, remainder: str) -> list[str]:
    parts: list[str] = []
    for part in remainder.split("/"):
        if part in (".", ""):
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
            continue
        # ".." above a root has nowhere to go; relative paths keep it
        if part != ".." or not root:
            parts.append(part)
    return parts



# ----------------------------------------------
#                   Public API
# ----------------------------------------------

def canonicalize(path: str) -> str:
    """
    Returns the canonical form of `path`:
      • backslashes become forward slashes
      • "." and empty segments are dropped, ".." pops its parent
      • the root ("/", "C:/", "scheme://") is preserved

    canonicalize(canonicalize(p)) == canonicalize(p) for every string.

    Examples:
      - "/a/b/../c/./d"  -> "/a/c/d"
      - "dir1//dir2/"    -> "dir1/dir2"
      - "C:\\x\\..\\y"   -> "C:/y"
      - "../a"           -> "../a"
    """
    if not path:
        return ""
    path = path.replace("\\", "/")
    root, remainder = splitRoot(path)
    parts = _canonicalParts(root, remainder)
    # "./C:/x" must not come out as "C:/x" read as relative once and as a drive the next time
    if (not root or root.endswith("://")) and parts and _isDrive(parts[0]):
        root += parts.pop(0) + "/"
    return root + "/".join(parts)



def join(base: str, *segments: str) -> str:
    """
    Concatenates non-empty parts with a single "/" and canonicalizes the result.

    A later absolute part does not restart the path:
      join("/var", "/www") -> "/var/www"
    """
    finalPath: str | None = None
    wasScheme = False
    for part in (base, *segments):
        if not part:
            continue
        if finalPath is None:
            finalPath = part
            wasScheme = "://" in part
            continue
        if finalPath[-1] not in ("/", "\\"):
            finalPath += "/"
        # Right after a scheme, a leading slash belongs to the next root
        finalPath += part if wasScheme else part.lstrip("/")
        wasScheme = False
    if finalPath is None:
        return ""
    return canonicalize(finalPath)



def joinOptional(base: str, additional: str | None) -> str:
    """`base` untouched when there is nothing to add, else join(base, additional)."""
    if additional is None or additional == "":
        return base
    return join(base, additional)
