# # Template store interface + in-memory and directory-backed implementations.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

log = logging.getLogger(__name__)


class TemplateStore:
    """
    Key -> template text lookup.

    Reads are keyed by a definition's template reference (usually a file name
    like ``meeting.html``); writes and deletes are keyed by widget id and land
    on ``<id>.html``.
    """

    def get_template_text(self, template_ref: str) -> Optional[str]:
        raise NotImplementedError

    def put_template_text(self, widget_id: str, text: str) -> None:
        raise NotImplementedError

    def delete(self, widget_id: str) -> bool:
        raise NotImplementedError


def template_name(widget_id: str) -> str:
    return f"{widget_id}.html"


class MemoryTemplateStore(TemplateStore):
    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        self._templates: Dict[str, str] = dict(templates or {})

    def get_template_text(self, template_ref: str) -> Optional[str]:
        return self._templates.get(template_ref)

    def put_template_text(self, widget_id: str, text: str) -> None:
        self._templates[template_name(widget_id)] = text

    def delete(self, widget_id: str) -> bool:
        return self._templates.pop(template_name(widget_id), None) is not None


class FileTemplateStore(TemplateStore):
    def __init__(self, root: Path):
        self.root = Path(root)

    def _path(self, name: str) -> Optional[Path]:
        # # Refs may contain sub-folders but never escape the root
        if not name:
            return None
        root = self.root.resolve()
        p = (root / name).resolve()
        if root != p and root not in p.parents:
            log.warning("Template ref %r points outside %s; ignoring", name, root)
            return None
        return p

    def get_template_text(self, template_ref: str) -> Optional[str]:
        p = self._path(template_ref)
        if p is None or not p.is_file():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Could not read template %s: %s", p, e)
            return None

    def put_template_text(self, widget_id: str, text: str) -> None:
        p = self._path(template_name(widget_id))
        if p is None:
            raise ValueError(f"Invalid widget id for template: {widget_id!r}")
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")

    def delete(self, widget_id: str) -> bool:
        p = self._path(template_name(widget_id))
        if p is None or not p.exists():
            return False
        p.unlink()
        return True


class LayeredTemplateStore(TemplateStore):
    """Reads try each store in turn; writes and deletes go to the first one."""

    def __init__(self, *stores: TemplateStore):
        if not stores:
            raise ValueError("LayeredTemplateStore needs at least one store")
        self.stores = stores

    def get_template_text(self, template_ref: str) -> Optional[str]:
        for s in self.stores:
            text = s.get_template_text(template_ref)
            if text is not None:
                return text
        return None

    def put_template_text(self, widget_id: str, text: str) -> None:
        self.stores[0].put_template_text(widget_id, text)

    def delete(self, widget_id: str) -> bool:
        return self.stores[0].delete(widget_id)
