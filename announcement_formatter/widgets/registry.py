# # Widget registry: id -> definition, rebuilt off to the side and swapped in whole.

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import UserMode, WidgetDefinition
from .loader import DefinitionError, iter_definition_files, load_definition_file

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class LoadFailure:
    path: Path
    reason: str


@dataclasses.dataclass(frozen=True)
class LoadReport:
    source: Path
    loaded: Tuple[str, ...] = ()
    failures: Tuple[LoadFailure, ...] = ()
    skipped: Tuple[Path, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


class WidgetRegistry:
    """
    Holds the known widget definitions.

    Readers never see a half-built map: every write builds a new dict and
    replaces ``self._widgets`` with one assignment.
    """

    def __init__(self, definitions: Iterable[WidgetDefinition] = ()):
        widgets: Dict[str, WidgetDefinition] = {}
        for d in definitions:
            widgets[d.id] = d
        self._widgets = widgets

    def load_all(self, source_dir: Path) -> LoadReport:
        source_dir = Path(source_dir)
        if not source_dir.exists():
            source_dir.mkdir(parents=True, exist_ok=True)
            self._widgets = {}
            log.info("Widget directory %s did not exist; created it empty", source_dir)
            return LoadReport(source=source_dir)

        fresh: Dict[str, WidgetDefinition] = {}
        loaded: List[str] = []
        failures: List[LoadFailure] = []
        skipped: List[Path] = []

        for path in iter_definition_files(source_dir):
            try:
                defn = load_definition_file(path)
            except DefinitionError as e:
                log.warning("Failed to load widget from %s: %s", path, e)
                failures.append(LoadFailure(path=path, reason=str(e)))
                continue

            if not defn.id:
                log.warning("Skipping %s: definition has no id", path)
                skipped.append(path)
                continue

            if defn.id in fresh:
                log.debug("Widget %s from %s replaces an earlier definition", defn.id, path)
            fresh[defn.id] = defn
            loaded.append(defn.id)

        # # Swap
        self._widgets = fresh
        log.info("Loaded %d widget definition(s) from %s (%d failed)", len(fresh), source_dir, len(failures))
        return LoadReport(source=source_dir, loaded=tuple(loaded), failures=tuple(failures), skipped=tuple(skipped))

    def get(self, widget_id: str) -> Optional[WidgetDefinition]:
        return self._widgets.get(widget_id)

    def all(self) -> List[WidgetDefinition]:
        return list(self._widgets.values())

    def ids(self) -> List[str]:
        return list(self._widgets.keys())

    def filter_by_mode(self, mode: UserMode) -> List[WidgetDefinition]:
        return [d for d in self._widgets.values() if d.allows(mode)]

    def group_by_category(self, mode: UserMode) -> Dict[str, List[WidgetDefinition]]:
        groups: Dict[str, List[WidgetDefinition]] = {}
        for d in self.filter_by_mode(mode):
            groups.setdefault(d.category, []).append(d)
        return groups

    def register(self, defn: WidgetDefinition) -> None:
        widgets = dict(self._widgets)
        widgets[defn.id] = defn
        self._widgets = widgets

    def remove(self, widget_id: str) -> bool:
        if widget_id not in self._widgets:
            return False
        widgets = dict(self._widgets)
        del widgets[widget_id]
        self._widgets = widgets
        return True

    def __len__(self) -> int:
        return len(self._widgets)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._widgets
