"""
Output Compiler
Assembles a RenderTree into final HTML, CSS and JS documents
"""

from typing import Protocol

from jinja2 import Environment, BaseLoader, StrictUndefined
from markupsafe import Markup

from pagecraft.models import GeneratedOutput, PageSettings, RenderTree, Theme
from .theme import theme_css

NO_JS = "/* No JavaScript required for this layout. */"
NAV_OFFSET = "64px"

RESPONSIVE_CSS = """
@media (max-width: 1024px) {
  .grid-4 { grid-template-columns: repeat(2, 1fr); }
}
@media (max-width: 768px) {
  .grid-3, .grid-4 { grid-template-columns: 1fr; }
  .cs-hero { padding: 4rem 0 3rem; }
  .cs-footer__top { grid-template-columns: 1fr 1fr; }
}
@media (max-width: 480px) {
  .grid-2, .grid-3 { grid-template-columns: 1fr; }
  .cs-pricing__card--featured { transform: none; }
  .cs-footer__top { grid-template-columns: 1fr; }
}
""".strip()

SCROLL_REVEAL_JS = """
// Scroll-reveal animation
const revealEls = document.querySelectorAll('.cs-feature-card, .cs-card, .cs-testimonial, .cs-pricing__card, .cs-faq__item');
if (revealEls.length && 'IntersectionObserver' in window) {
  revealEls.forEach(el => { el.style.opacity = '0'; el.style.transform = 'translateY(20px)'; el.style.transition = 'opacity .5s ease, transform .5s ease'; });
  const io = new IntersectionObserver(entries => {
    entries.forEach(e => { if (e.isIntersecting) { e.target.style.opacity = '1'; e.target.style.transform = 'none'; io.unobserve(e.target); } });
  }, { threshold: 0.12 });
  revealEls.forEach(el => io.observe(el));
}
""".strip()

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="en" data-theme="{{ mode }}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="{{ description }}">
  <title>{{ title }}</title>
{% if inline %}
  <style>{{ css }}</style>
{% else %}
  <link rel="stylesheet" href="styles.css">
{% endif %}
</head>
<body{% if nav_offset %} style="padding-top: {{ nav_offset }};"{% endif %}>

{{ body }}

{% if not inline %}
  <script defer src="script.js"></script>
{% elif js %}
  <script>{{ js }}</script>
{% endif %}
</body>
</html>
"""


class OutputCompiler(Protocol):
    """Turns a RenderTree into deliverable documents. Must be deterministic."""

    def compile_full(self, tree: RenderTree, theme: Theme, settings: PageSettings) -> GeneratedOutput:
        ...

    def compile_for_preview(self, tree: RenderTree, theme: Theme, settings: PageSettings) -> str:
        ...


def indent(text: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line if line else line for line in text.split("\n"))


class TemplateOutputCompiler:
    """
    Default output compiler backed by jinja2.

    Full mode produces three files where the HTML links ``styles.css`` and
    ``script.js``; preview mode produces one self-contained document.
    """

    def __init__(self, default_title: str = "My Project", default_description: str = "Built with pagecraft"):
        self.default_title = default_title
        self.default_description = default_description
        self._env = Environment(
            loader=BaseLoader(),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._page = self._env.from_string(PAGE_TEMPLATE)

    def compile_css(self, tree: RenderTree, theme: Theme, settings: PageSettings) -> str:
        """Header, theme tokens, block styles, then responsive rules."""
        return "\n".join([
            "/* === pagecraft - Generated Stylesheet === */",
            "",
            "/* 1. Design Tokens & Theme */",
            theme_css(theme),
            f":root {{ --max-w: {settings.max_width or '1200px'}; }}",
            "",
            "/* 2. Block Styles */",
            *tree.css,
            "",
            "/* 3. Responsive */",
            RESPONSIVE_CSS,
        ])

    def compile_js(self, tree: RenderTree, settings: PageSettings) -> str:
        """Wrap block scripts in one DOMContentLoaded handler."""
        if not any(fragment.strip() for fragment in tree.js):
            return NO_JS

        return "\n".join([
            "/* === pagecraft - Generated Script === */",
            "'use strict';",
            "",
            "// Initialise components",
            'document.addEventListener("DOMContentLoaded", () => {',
            "",
            *(indent(fragment, 2) for fragment in tree.js),
            "",
            indent(SCROLL_REVEAL_JS, 2) if settings.animations else "",
            "",
            "});",
        ])

    def compile_html(
        self,
        tree: RenderTree,
        theme: Theme,
        settings: PageSettings,
        inline: bool = False,
        css: str = "",
        js: str = "",
    ) -> str:
        """Render the page shell around the block fragments."""
        # Fragments and assets are already final markup; only metadata is escaped.
        return self._page.render(
            mode=theme.mode,
            title=settings.title or self.default_title,
            description=settings.description or self.default_description,
            inline=inline,
            css=Markup(css),
            js=Markup(js),
            nav_offset=NAV_OFFSET if settings.navbar != "none" else "",
            body=Markup("\n\n".join(tree.html)),
        ).strip()

    def compile_full(self, tree: RenderTree, theme: Theme, settings: PageSettings) -> GeneratedOutput:
        return GeneratedOutput(
            html=self.compile_html(tree, theme, settings),
            css=self.compile_css(tree, theme, settings),
            js=self.compile_js(tree, settings),
        )

    def compile_for_preview(self, tree: RenderTree, theme: Theme, settings: PageSettings) -> str:
        css = self.compile_css(tree, theme, settings)
        js = self.compile_js(tree, settings) if tree.js else ""
        return self.compile_html(tree, theme, settings, inline=True, css=css, js=js)
