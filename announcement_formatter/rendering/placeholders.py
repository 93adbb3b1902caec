# # Placeholder substitution for widget templates.

from __future__ import annotations

import re
from typing import Iterable, Mapping

from ..models import FieldValue
from ..util import escape_html

# # Anything still shaped like {{...}} after substitution
UNMATCHED_PLACEHOLDER = re.compile(r"\{\{[^}]+\}\}")


def token(name: str) -> str:
    return "{{" + name + "}}"


def substitute_fields(template: str, fields: Iterable[FieldValue]) -> str:
    out = template
    for f in fields:
        if not f.name:
            continue
        out = out.replace(token(f.name), escape_html(f.value))
    return out


def substitute_raw(template: str, values: Mapping[str, str]) -> str:
    # # Trusted values (palette colors); inserted verbatim
    out = template
    for name, value in values.items():
        out = out.replace(token(name), value)
    return out


def strip_unmatched(template: str) -> str:
    return UNMATCHED_PLACEHOLDER.sub("", template)
