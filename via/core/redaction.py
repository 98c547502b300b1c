# via/core/redaction.py
from __future__ import annotations

import re

__all__ = ["redactText"]



# Hosts are stored verbatim and may carry credentials, so they are scrubbed
# before anything reaches a handler.
_SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # URL user-info: //user:secret@host
    (re.compile(r"(?iu)(//[^/\s:@]+:)[^/\s@]+(@)"), r"\1***\2"),

    # Bearer or Authorization headers
    (re.compile(r"(?iu)(Bearer\s+)[A-Za-z0-9._\-]+"), r"\1***"),
    (re.compile(r"(?iu)(Authorization\s*[:=]\s*)[A-Za-z0-9._\-]+"), r"\1***"),

    # Password / token fields in JSON
    (re.compile(r'(?iu)("password"\s*:\s*")[^"]+(")'), r"\1***\2"),
    (re.compile(r'(?iu)("api[_\-]?key"\s*:\s*")[^"]+(")'), r"\1***\2"),
    (re.compile(r'(?iu)("token"\s*:\s*")[^"]+(")'), r"\1***\2"),

    # Query parameter forms like token=abcdef
    (re.compile(r"(?iu)((?:token|api[_\-]?key|password)=)[^&\s]+"), r"\1***"),
]



def redactText(text: str) -> str:
    """Return sanitized text with sensitive substrings replaced by ***."""
    if not text:
        return text
    out = text
    for pattern, repl in _SENSITIVE_PATTERNS:
        try:
            out = pattern.sub(repl, out)
        except re.error:
            continue # Never crash logging on regex errors
    return out
