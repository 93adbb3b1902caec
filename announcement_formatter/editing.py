# # Document editing commands: each takes a snapshot and returns a new one.

from __future__ import annotations

import dataclasses
import datetime as dt
from typing import Callable, Optional, Tuple

from .models import AnnouncementDocument, DocumentWidget, FieldValue, WidgetDefinition

Clock = Callable[[], dt.datetime]


def new_document(title: Optional[str] = None, clock: Clock = dt.datetime.now) -> AnnouncementDocument:
    now = clock()
    kw = {"title": title} if title else {}
    return AnnouncementDocument(created_at=now, modified_at=now, **kw)


def _renumber(widgets) -> Tuple[DocumentWidget, ...]:
    return tuple(w if w.order == i else dataclasses.replace(w, order=i) for i, w in enumerate(widgets))


def _in_display_order(widgets) -> list:
    # # sorted() is stable: ties keep list position, as the renderer does
    return sorted(widgets, key=lambda w: w.order)


def _touch(doc: AnnouncementDocument, widgets, clock: Clock) -> AnnouncementDocument:
    return dataclasses.replace(doc, widgets=tuple(widgets), modified_at=clock())


def new_instance(defn: WidgetDefinition, order: int, clock: Clock = dt.datetime.now) -> DocumentWidget:
    now = clock()
    fields = tuple(FieldValue(name=f.id, value=f.default_value or "") for f in defn.fields)
    return DocumentWidget(definition_id=defn.id, order=order, fields=fields, created_at=now, modified_at=now)


def add_widget(doc: AnnouncementDocument, defn: WidgetDefinition, clock: Clock = dt.datetime.now) -> AnnouncementDocument:
    ordered = _renumber(_in_display_order(doc.widgets))
    widget = new_instance(defn, order=len(ordered), clock=clock)
    return _touch(doc, ordered + (widget,), clock)


def remove_widget(doc: AnnouncementDocument, widget_id: str, clock: Clock = dt.datetime.now) -> AnnouncementDocument:
    kept = [w for w in _in_display_order(doc.widgets) if w.id != widget_id]
    if len(kept) == len(doc.widgets):
        return doc
    return _touch(doc, _renumber(kept), clock)


def move_widget(doc: AnnouncementDocument, widget_id: str, delta: int, clock: Clock = dt.datetime.now) -> AnnouncementDocument:
    # # Operates on display order (order field, stable), then renumbers 0..n-1
    ordered = _in_display_order(doc.widgets)
    idx = next((i for i, w in enumerate(ordered) if w.id == widget_id), None)
    if idx is None:
        return doc
    target = max(0, min(len(ordered) - 1, idx + delta))
    if target == idx:
        return doc
    ordered.insert(target, ordered.pop(idx))
    return _touch(doc, _renumber(ordered), clock)


def set_field_value(
    doc: AnnouncementDocument,
    widget_id: str,
    name: str,
    value: str,
    clock: Clock = dt.datetime.now,
) -> AnnouncementDocument:
    out = []
    found = False
    for w in doc.widgets:
        if w.id != widget_id:
            out.append(w)
            continue
        found = True
        if any(f.name == name for f in w.fields):
            fields = tuple(FieldValue(f.name, value) if f.name == name else f for f in w.fields)
        else:
            fields = w.fields + (FieldValue(name, value),)
        out.append(dataclasses.replace(w, fields=fields, modified_at=clock()))
    if not found:
        return doc
    return _touch(doc, out, clock)
