# # Generator interface: assembles rendered widget fragments into final markup.

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from ..context import RenderContext
from ..models import AnnouncementDocument

if TYPE_CHECKING:
    from ..rendering.renderer import WidgetOutcome


class BaseGenerator:
    def __init__(self, ctx: RenderContext):
        self.ctx = ctx

    def assemble(self, document: AnnouncementDocument, outcomes: Sequence["WidgetOutcome"]) -> str:
        raise NotImplementedError

    @staticmethod
    def emitted_html(outcomes: Sequence["WidgetOutcome"]) -> list:
        return [o.html for o in outcomes if o.emitted]
