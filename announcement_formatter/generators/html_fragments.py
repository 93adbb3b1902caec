# # Fragment generator: widget markup only, for embedding in another page.

from __future__ import annotations

from .base import BaseGenerator
from .registry import register_generator


@register_generator("html_fragments")
class HtmlFragmentsGenerator(BaseGenerator):
    def assemble(self, document, outcomes) -> str:
        return "\n".join(self.emitted_html(outcomes))
