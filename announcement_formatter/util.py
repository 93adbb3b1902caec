# # Shared helpers: escaping and date labels.

from __future__ import annotations

import datetime as dt
from typing import Any

# # Order matters: "&" first so later entities are not double-escaped
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: Any) -> str:
    if text is None:
        return ""
    out = str(text)
    for raw, ent in _ESCAPES:
        out = out.replace(raw, ent)
    return out


def format_generated_on(when: dt.datetime) -> str:
    # # e.g. "January 05, 2026"
    return when.strftime("%B %d, %Y")
