# # HTML page generator: stitches widget fragments into the document boilerplate.

from __future__ import annotations

from .base import BaseGenerator
from .registry import register_generator
from ..output.html_shell import wrap_page
from ..util import escape_html, format_generated_on


@register_generator("html_page")
class HtmlPageGenerator(BaseGenerator):
    def assemble(self, document, outcomes) -> str:
        return wrap_page(
            title=escape_html(document.title),
            subtitle=escape_html(document.subtitle),
            body_html="\n".join(self.emitted_html(outcomes)),
            footer=f"Generated on {format_generated_on(self.ctx.generated_at)}",
            theme=self.ctx.theme,
        )
