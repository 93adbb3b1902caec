# # Widget definition files: JSON record <-> WidgetDefinition.

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from ..models import FieldType, UserMode, WidgetDefinition, WidgetField
from ..themes import DEFAULT_COLORS, WidgetColors


class DefinitionError(ValueError):
    """A definition file could not be turned into a WidgetDefinition."""


def _lower_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    # # JSON keys are matched case-insensitively (displayName == displayname)
    return {str(k).lower(): v for k, v in d.items()}


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    return str(v)


def _coerce_colors(raw: Any) -> WidgetColors:
    if not isinstance(raw, dict):
        return DEFAULT_COLORS
    c = _lower_keys(raw)
    return WidgetColors(
        primary=str(c.get("primary") or DEFAULT_COLORS.primary),
        background=str(c.get("background") or DEFAULT_COLORS.background),
        text=str(c.get("text") or DEFAULT_COLORS.text),
        accent=str(c.get("accent") or DEFAULT_COLORS.accent),
    )


def _coerce_field(raw: Any) -> WidgetField:
    if not isinstance(raw, dict):
        raise DefinitionError(f"field entry must be an object, got {type(raw).__name__}")
    f = _lower_keys(raw)
    options = f.get("options")
    if options is not None and not isinstance(options, list):
        raise DefinitionError(f"field {f.get('id')!r}: options must be a list")
    return WidgetField(
        id=str(f.get("id") or ""),
        type=FieldType.parse(f.get("type")),
        label=str(f.get("label") or ""),
        required=bool(f.get("required", True)),
        default_value=_opt_str(f.get("defaultvalue")),
        placeholder=_opt_str(f.get("placeholder")),
        options=tuple(str(o) for o in options) if options is not None else None,
        validation=_opt_str(f.get("validation")),
        help_text=_opt_str(f.get("helptext")),
    )


def definition_from_dict(data: Any) -> WidgetDefinition:
    if not isinstance(data, dict):
        raise DefinitionError(f"definition must be a JSON object, got {type(data).__name__}")
    d = _lower_keys(data)

    fields_raw = d.get("fields") or []
    if not isinstance(fields_raw, list):
        raise DefinitionError("fields must be a list")

    modes_raw = d.get("allowedmodes")
    allowed = None
    if modes_raw:
        if not isinstance(modes_raw, list):
            raise DefinitionError("allowedModes must be a list")
        parsed = [UserMode.parse(m) for m in modes_raw]
        unknown = [m for m, p in zip(modes_raw, parsed) if p is None]
        if unknown:
            raise DefinitionError(f"unknown modes: {unknown}")
        allowed = frozenset(parsed)

    return WidgetDefinition(
        id=str(d.get("id") or ""),
        display_name=str(d.get("displayname") or ""),
        category=str(d.get("category") or "General"),
        description=_opt_str(d.get("description")),
        icon=_opt_str(d.get("icon")),
        template=str(d.get("template") or ""),
        fields=tuple(_coerce_field(f) for f in fields_raw),
        allowed_modes=allowed,
        version=str(d.get("version") or "1.0.0"),
        colors=_coerce_colors(d.get("colors")),
    )


def definition_to_dict(defn: WidgetDefinition) -> Dict[str, Any]:
    fields: List[Dict[str, Any]] = []
    for f in defn.fields:
        fields.append({
            "id": f.id,
            "type": f.type.value,
            "label": f.label,
            "required": f.required,
            "defaultValue": f.default_value,
            "placeholder": f.placeholder,
            "options": list(f.options) if f.options is not None else None,
            "validation": f.validation,
            "helpText": f.help_text,
        })
    return {
        "id": defn.id,
        "displayName": defn.display_name,
        "category": defn.category,
        "description": defn.description,
        "icon": defn.icon,
        "template": defn.template,
        "fields": fields,
        "allowedModes": sorted(m.value for m in defn.allowed_modes) if defn.allowed_modes else None,
        "version": defn.version,
        "colors": {
            "primary": defn.colors.primary,
            "background": defn.colors.background,
            "text": defn.colors.text,
            "accent": defn.colors.accent,
        },
    }


def iter_definition_files(root: Path) -> Iterator[Path]:
    # # Sorted so last-loaded-wins is deterministic across platforms
    yield from sorted(root.rglob("*.json"), key=lambda p: p.relative_to(root).as_posix())


def load_definition_file(path: Path) -> WidgetDefinition:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DefinitionError(str(e)) from e
    return definition_from_dict(data)


def save_definition_file(defn: WidgetDefinition, directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    p = directory / f"{defn.id}.json"
    p.write_text(json.dumps(definition_to_dict(defn), indent=2), encoding="utf-8")
    return p
