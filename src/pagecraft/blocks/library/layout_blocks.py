"""
Layout Blocks
Page landmarks and generic wrappers: navbar, footer, section
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..types import BlockDefinition
from .rendering import template, merged, text, flag, split_list

if TYPE_CHECKING:
    from ..registry import BlockRegistry


# =============================================================================
# NAVBAR
# =============================================================================

NAVBAR_DEFAULTS = {
    "brand": "pagecraft",
    "links": "Home, About, Services, Contact",
    "cta": "Get Started",
    "sticky": True,
}

NAVBAR_HTML = template("""
<nav class="cs-navbar{% if sticky %} cs-navbar--sticky{% endif %}">
  <div class="container flex justify-between items-center">
    <a href="#" class="cs-navbar__brand">{{ brand }}</a>
    <button class="cs-navbar__toggle" aria-label="Menu" aria-expanded="false">
      <span></span><span></span><span></span>
    </button>
    <ul class="cs-navbar__menu">
{% for link in links %}
      <li><a href="#" class="cs-navbar__link">{{ link }}</a></li>
{% endfor %}
{% if cta %}
      <li><a href="#" class="btn btn-primary">{{ cta }}</a></li>
{% endif %}
    </ul>
  </div>
</nav>
""")

NAVBAR_CSS = """
.cs-navbar { background: var(--surface, #fff); border-bottom: 1px solid var(--border, #E2E8F0); height: 64px; display: flex; align-items: center; z-index: 100; }
.cs-navbar--sticky { position: sticky; top: 0; }
.cs-navbar__brand { font-size: 1.25rem; font-weight: 800; color: var(--primary, #2563EB); letter-spacing: -.02em; }
.cs-navbar__menu { display: flex; align-items: center; gap: 1.5rem; list-style: none; }
.cs-navbar__link { font-size: .9rem; font-weight: 500; color: var(--text, #0F172A); transition: color .2s; }
.cs-navbar__link:hover { color: var(--primary, #2563EB); }
.cs-navbar__toggle { display: none; flex-direction: column; gap: 4px; background: none; border: none; cursor: pointer; padding: 6px; }
.cs-navbar__toggle span { display: block; width: 22px; height: 2px; background: var(--text, #0F172A); border-radius: 2px; transition: .2s; }
@media (max-width: 768px) {
  .cs-navbar__toggle { display: flex; }
  .cs-navbar__menu { display: none; position: absolute; top: 64px; left: 0; right: 0; background: var(--surface, #fff); flex-direction: column; padding: 1rem 1.5rem; border-bottom: 1px solid var(--border, #E2E8F0); gap: 1rem; }
  .cs-navbar__menu.is-open { display: flex; }
}
"""

NAVBAR_JS = """
document.querySelectorAll('.cs-navbar__toggle').forEach(btn => {
  btn.addEventListener('click', () => {
    const menu = btn.closest('.cs-navbar').querySelector('.cs-navbar__menu');
    const open = menu.classList.toggle('is-open');
    btn.setAttribute('aria-expanded', open);
  });
});
"""


def navbar_html(config: Mapping[str, Any]) -> str:
    c = merged(NAVBAR_DEFAULTS, config)
    return NAVBAR_HTML.render(
        brand=text(c.get("brand"), "pagecraft"),
        links=[link for link in split_list(c.get("links"), ",") if link],
        cta=text(c.get("cta")),
        sticky=flag(c.get("sticky")),
    )


# =============================================================================
# FOOTER
# =============================================================================

FOOTER_DEFAULTS = {
    "brand": "pagecraft",
    "tagline": "Professional frontend ecosystem.",
    "cols": (
        "Product,Templates,Components,Design System,Changelog;"
        "Resources,Documentation,Blog,Community,Support;"
        "Company,About,Careers,Privacy,Terms"
    ),
}

FOOTER_HTML = template("""
<footer class="cs-footer">
  <div class="container">
    <div class="cs-footer__top">
      <div class="cs-footer__brand">
        <div class="cs-footer__logo">{{ brand }}</div>
        <p class="cs-footer__tagline">{{ tagline }}</p>
      </div>
{% for col in columns %}
      <div>
        <p class="cs-footer__col-title">{{ col.title }}</p>
{% for link in col.links %}
        <a href="#" class="cs-footer__link">{{ link }}</a>
{% endfor %}
      </div>
{% endfor %}
    </div>
    <div class="cs-footer__bottom">
      <p>&copy; {% if year %}{{ year }} {% endif %}{{ brand }}. All rights reserved.</p>
    </div>
  </div>
</footer>
""")

FOOTER_CSS = """
.cs-footer { background: var(--gray-900, #0F172A); color: #94A3B8; padding: 4rem 0 2rem; }
.cs-footer__top { display: grid; grid-template-columns: 1.5fr repeat(auto-fit, minmax(140px, 1fr)); gap: 3rem; margin-bottom: 3rem; }
.cs-footer__logo { font-size: 1.2rem; font-weight: 800; color: #fff; margin-bottom: .5rem; }
.cs-footer__tagline { font-size: .85rem; line-height: 1.6; }
.cs-footer__col-title { font-size: .8rem; font-weight: 700; text-transform: uppercase; letter-spacing: .08em; color: #fff; margin-bottom: 1rem; }
.cs-footer__link { display: block; font-size: .875rem; color: #64748B; margin-bottom: .5rem; transition: color .2s; }
.cs-footer__link:hover { color: #fff; }
.cs-footer__bottom { border-top: 1px solid #1E293B; padding-top: 1.5rem; font-size: .8rem; }
@media (max-width: 768px) { .cs-footer__top { grid-template-columns: 1fr 1fr; } }
"""


def footer_html(config: Mapping[str, Any]) -> str:
    c = merged(FOOTER_DEFAULTS, config)
    columns = []
    for raw in split_list(c.get("cols"), ";"):
        title, *links = [part.strip() for part in raw.split(",")]
        columns.append({"title": title, "links": [link for link in links if link]})
    return FOOTER_HTML.render(
        brand=text(c.get("brand"), "pagecraft"),
        tagline=text(c.get("tagline")),
        columns=columns,
        year=text(c.get("year")),
    )


# =============================================================================
# SECTION
# =============================================================================

SECTION_DEFAULTS = {
    "title": "Section Title",
    "subtitle": "Section subtitle goes here describing the content.",
    "bg": "default",
}

SECTION_HTML = template("""
<section class="cs-section py-24{% if alt %} cs-section--alt{% endif %}">
  <div class="container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2>{% if subtitle %}<p class="cs-section-sub">{{ subtitle }}</p>{% endif %}</div>
{% endif %}
    <div class="cs-section__slot">Add blocks here</div>
  </div>
</section>
""")

SECTION_CSS = """
.cs-section--alt { background: var(--gray-50, #F8FAFC); }
.cs-section__slot { min-height: 120px; border: 2px dashed var(--border, #E2E8F0); border-radius: var(--radius, 8px); display: flex; align-items: center; justify-content: center; color: var(--text-2, #64748B); font-size: .9rem; }
"""


def section_html(config: Mapping[str, Any]) -> str:
    c = merged(SECTION_DEFAULTS, config)
    return SECTION_HTML.render(
        title=text(c.get("title")),
        subtitle=text(c.get("subtitle")),
        alt=text(c.get("bg")) == "alt",
    )


def register_layout_blocks(registry: "BlockRegistry") -> None:
    """Register the landmark and wrapper blocks."""

    registry.register(BlockDefinition(
        type_id="navbar",
        name="Navbar",
        icon="▬",
        category="layout",
        description="Sticky navigation bar with brand and links",
        default_config=NAVBAR_DEFAULTS,
        html=navbar_html,
        css=lambda c: NAVBAR_CSS,
        js=lambda c: NAVBAR_JS,
    ))

    registry.register(BlockDefinition(
        type_id="footer",
        name="Footer",
        icon="▁",
        category="layout",
        description="Corporate footer with link columns and copyright",
        default_config=FOOTER_DEFAULTS,
        html=footer_html,
        css=lambda c: FOOTER_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="section",
        name="Section",
        icon="□",
        category="layout",
        description="Generic section with a title and content area",
        default_config=SECTION_DEFAULTS,
        html=section_html,
        css=lambda c: SECTION_CSS,
    ))
