# # Core records: widget definitions (library side) and documents (instance side).

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import uuid
from typing import Dict, FrozenSet, Optional, Tuple

from .themes import DEFAULT_COLORS, WidgetColors

DEFAULT_TITLE = "Untitled Document"
DEFAULT_SUBTITLE = "Civil Air Patrol - Heartland Composite Squadron"


class FieldType(str, enum.Enum):
    STRING = "string"
    MULTILINE = "multiline"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DROPDOWN = "dropdown"
    EMAIL = "email"
    URL = "url"

    @classmethod
    def parse(cls, raw: object) -> "FieldType":
        # # Case-insensitive, unknown -> string
        key = str(raw or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.STRING


class UserMode(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @classmethod
    def parse(cls, raw: object) -> Optional["UserMode"]:
        key = str(raw or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None


@dataclasses.dataclass(frozen=True)
class WidgetField:
    id: str
    type: FieldType = FieldType.STRING
    label: str = ""
    required: bool = True
    default_value: Optional[str] = None
    placeholder: Optional[str] = None
    options: Optional[Tuple[str, ...]] = None
    validation: Optional[str] = None
    help_text: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class WidgetDefinition:
    id: str
    display_name: str = ""
    category: str = "General"
    description: Optional[str] = None
    icon: Optional[str] = None
    template: str = ""
    fields: Tuple[WidgetField, ...] = ()
    # # Empty / None means usable in every mode
    allowed_modes: Optional[FrozenSet[UserMode]] = None
    version: str = "1.0.0"
    colors: WidgetColors = DEFAULT_COLORS

    def allows(self, mode: UserMode) -> bool:
        return not self.allowed_modes or mode in self.allowed_modes


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> dt.datetime:
    return dt.datetime.now()


@dataclasses.dataclass(frozen=True)
class FieldValue:
    name: str
    value: str = ""


@dataclasses.dataclass(frozen=True)
class DocumentWidget:
    definition_id: str
    order: int = 0
    fields: Tuple[FieldValue, ...] = ()
    id: str = dataclasses.field(default_factory=_new_id)
    created_at: dt.datetime = dataclasses.field(default_factory=_now)
    modified_at: dt.datetime = dataclasses.field(default_factory=_now)

    def value_of(self, name: str) -> str:
        for f in self.fields:
            if f.name == name:
                return f.value
        return ""


@dataclasses.dataclass(frozen=True)
class AnnouncementDocument:
    title: str = DEFAULT_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    widgets: Tuple[DocumentWidget, ...] = ()
    metadata: Dict[str, str] = dataclasses.field(default_factory=dict)
    id: str = dataclasses.field(default_factory=_new_id)
    created_at: dt.datetime = dataclasses.field(default_factory=_now)
    modified_at: dt.datetime = dataclasses.field(default_factory=_now)
