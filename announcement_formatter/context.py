# # Shared render context to avoid generator<->renderer circular imports.

from __future__ import annotations

import dataclasses
import datetime as dt

from .templates.store import TemplateStore
from .themes import CAP_THEME, PageTheme
from .widgets.registry import WidgetRegistry


@dataclasses.dataclass
class RenderContext:
    registry: WidgetRegistry
    store: TemplateStore
    generated_at: dt.datetime
    theme: PageTheme = CAP_THEME
