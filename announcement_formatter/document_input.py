# # Document input for the CLI: a JSON file describing title + widget instances.

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple

from .models import DEFAULT_SUBTITLE, DEFAULT_TITLE, AnnouncementDocument, DocumentWidget, FieldValue


def _coerce_fields(f: Any) -> Tuple[FieldValue, ...]:
    # # Dict form: {"title": "Staff Meeting", ...}
    if isinstance(f, dict):
        return tuple(FieldValue(name=str(k), value="" if v is None else str(v)) for k, v in f.items())

    # # List form: [{"name": "title", "value": "Staff Meeting"}, ...]
    if isinstance(f, list):
        out: List[FieldValue] = []
        for entry in f:
            if not isinstance(entry, dict) or "name" not in entry:
                continue
            v = entry.get("value")
            out.append(FieldValue(name=str(entry["name"]), value="" if v is None else str(v)))
        return tuple(out)

    return ()


def _coerce_widgets(w: Any) -> List[DocumentWidget]:
    if not isinstance(w, list):
        return []
    out: List[DocumentWidget] = []
    for pos, entry in enumerate(w):
        if not isinstance(entry, dict):
            continue
        def_id = entry.get("definitionId", entry.get("widget"))
        if def_id is None:
            continue
        kw = {"id": str(entry["id"])} if entry.get("id") else {}
        try:
            order = int(entry.get("order", pos))
        except (TypeError, ValueError):
            order = pos
        out.append(DocumentWidget(definition_id=str(def_id), order=order, fields=_coerce_fields(entry.get("fields")), **kw))
    return out


def document_from_dict(data: Any) -> AnnouncementDocument:
    if not isinstance(data, dict):
        raise ValueError("document must be a JSON object")
    meta = data.get("metadata") or {}
    return AnnouncementDocument(
        title=str(data.get("title") or DEFAULT_TITLE),
        subtitle=str(data.get("subtitle") or DEFAULT_SUBTITLE),
        widgets=tuple(_coerce_widgets(data.get("widgets"))),
        metadata={str(k): str(v) for k, v in meta.items()} if isinstance(meta, dict) else {},
    )


def load_document(path: Path) -> AnnouncementDocument:
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    return document_from_dict(json.loads(path.read_text(encoding="utf-8")))
