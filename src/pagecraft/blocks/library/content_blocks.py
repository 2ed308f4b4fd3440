"""
Content Blocks
Sections placed between the landmarks: hero, features, pricing, faq, ...
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..types import BlockDefinition
from .rendering import template, merged, text, split_list, split_records

if TYPE_CHECKING:
    from ..registry import BlockRegistry


SECTION_TITLE_CSS = """
.cs-section-title { font-size: clamp(1.6rem, 3vw, 2.4rem); font-weight: 800; letter-spacing: -.03em; margin-bottom: .75rem; }
.cs-section-sub { font-size: 1.05rem; color: var(--text-2, #64748B); max-width: 560px; margin: 0 auto; }
"""

FEATURE_ICONS = ["⚡", "🎨", "📦", "🛡", "🔧", "🚀", "💡", "🌐", "✓"]


def grid_columns(value: Any) -> str:
    cols = text(value, "3")
    return cols if cols in ("2", "3", "4") else "3"


# =============================================================================
# HERO
# =============================================================================

HERO_DEFAULTS = {
    "title": "Build Professional Websites Faster",
    "subtitle": "A complete frontend ecosystem. No frameworks. No dependencies. Just clean code ready for production.",
    "cta": "Get Started",
    "cta2": "View Templates",
    "badge": "New - v2.0",
}

HERO_HTML = template("""
<section class="cs-hero">
  <div class="container text-center">
{% if badge %}
    <span class="cs-hero__badge">{{ badge }}</span>
{% endif %}
    <h1 class="cs-hero__title">{{ title }}</h1>
    <p class="cs-hero__sub">{{ subtitle }}</p>
    <div class="cs-hero__actions">
{% if cta %}
      <a href="#" class="btn btn-primary">{{ cta }}</a>
{% endif %}
{% if cta2 %}
      <a href="#" class="btn btn-outline">{{ cta2 }}</a>
{% endif %}
    </div>
  </div>
</section>
""")

HERO_CSS = """
.cs-hero { padding: 6rem 0 5rem; background: linear-gradient(135deg, var(--primary, #2563EB) 0%, var(--accent, #7C3AED) 100%); color: #fff; }
.cs-hero__badge { display: inline-block; padding: .3rem .9rem; background: rgba(255,255,255,.15); border: 1px solid rgba(255,255,255,.3); border-radius: 999px; font-size: .8rem; font-weight: 600; letter-spacing: .04em; margin-bottom: 1.5rem; }
.cs-hero__title { font-size: clamp(2rem, 5vw, 3.5rem); font-weight: 800; line-height: 1.15; letter-spacing: -.03em; margin-bottom: 1.5rem; }
.cs-hero__sub { font-size: 1.15rem; color: rgba(255,255,255,.85); max-width: 600px; margin: 0 auto 2.5rem; line-height: 1.7; }
.cs-hero__actions { display: flex; gap: 1rem; justify-content: center; flex-wrap: wrap; }
.cs-hero__actions .btn-primary { background: #fff; color: var(--primary, #2563EB); border-color: #fff; }
.cs-hero__actions .btn-outline { color: #fff; border-color: rgba(255,255,255,.5); }
.cs-hero__actions .btn-outline:hover { background: rgba(255,255,255,.15); }
"""


def hero_html(config: Mapping[str, Any]) -> str:
    c = merged(HERO_DEFAULTS, config)
    return HERO_HTML.render(
        badge=text(c.get("badge")),
        title=text(c.get("title")),
        subtitle=text(c.get("subtitle")),
        cta=text(c.get("cta")),
        cta2=text(c.get("cta2")),
    )


# =============================================================================
# FEATURES
# =============================================================================

FEATURES_DEFAULTS = {
    "title": "Everything You Need",
    "subtitle": "A complete set of professional building blocks for your next project.",
    "cols": "3",
    "items": (
        "Zero Dependencies|Pure HTML5, CSS3 and vanilla JS, no build tools required.;"
        "Fully Responsive|Mobile-first design that looks right on every screen size.;"
        "Production Ready|Clean, commented, scalable architecture ready to ship."
    ),
}

FEATURES_HTML = template("""
<section class="cs-features py-24">
  <div class="container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2>{% if subtitle %}<p class="cs-section-sub">{{ subtitle }}</p>{% endif %}</div>
{% endif %}
    <div class="grid-{{ cols }}">
{% for item in items %}
      <div class="cs-feature-card">
        <div class="cs-feature-card__icon">{{ item.icon }}</div>
        <h3 class="cs-feature-card__title">{{ item.title }}</h3>
        <p class="cs-feature-card__desc">{{ item.desc }}</p>
      </div>
{% endfor %}
    </div>
  </div>
</section>
""")

FEATURES_CSS = SECTION_TITLE_CSS + """
.cs-feature-card { background: var(--surface, #fff); border: 1px solid var(--border, #E2E8F0); border-radius: calc(var(--radius, 8px) * 1.5); padding: 2rem; transition: box-shadow .25s, transform .25s; }
.cs-feature-card:hover { box-shadow: 0 12px 40px rgba(0,0,0,.08); transform: translateY(-3px); }
.cs-feature-card__icon { font-size: 2rem; margin-bottom: 1rem; }
.cs-feature-card__title { font-size: 1.05rem; font-weight: 700; margin-bottom: .5rem; }
.cs-feature-card__desc { font-size: .9rem; color: var(--text-2, #64748B); line-height: 1.65; }
"""


def features_html(config: Mapping[str, Any]) -> str:
    c = merged(FEATURES_DEFAULTS, config)
    items = [
        {"icon": FEATURE_ICONS[i % len(FEATURE_ICONS)], "title": title, "desc": desc}
        for i, (title, desc) in enumerate(split_records(c.get("items"), 2))
    ]
    return FEATURES_HTML.render(
        title=text(c.get("title")),
        subtitle=text(c.get("subtitle")),
        cols=grid_columns(c.get("cols")),
        items=items,
    )


# =============================================================================
# PRICING
# =============================================================================

PRICING_DEFAULTS = {
    "title": "Simple, Transparent Pricing",
    "featured": "1",
    "plan1": "Starter|Free;For individuals;Up to 5 projects;Community support;Basic components",
    "plan2": "Pro|$29/mo;For professionals;Unlimited projects;Priority support;All components;Advanced templates",
    "plan3": "Enterprise|Custom;For teams;Everything in Pro;Dedicated support;Custom integrations;SLA guarantee",
}

PRICING_HTML = template("""
<section class="cs-pricing py-24">
  <div class="container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2></div>
{% endif %}
    <div class="cs-pricing__grid">
{% for plan in plans %}
      <div class="cs-pricing__card{% if plan.featured %} cs-pricing__card--featured{% endif %}">
{% if plan.featured %}
        <span class="cs-pricing__badge">Most Popular</span>
{% endif %}
        <h3 class="cs-pricing__name">{{ plan.name }}</h3>
        <div class="cs-pricing__price">{{ plan.price }}</div>
        <ul class="cs-pricing__feats">
{% for feat in plan.features %}
          <li>✓ {{ feat }}</li>
{% endfor %}
        </ul>
        <a href="#" class="btn {{ 'btn-primary' if plan.featured else 'btn-outline' }} cs-pricing__cta">Get Started</a>
      </div>
{% endfor %}
    </div>
  </div>
</section>
""")

PRICING_CSS = SECTION_TITLE_CSS + """
.cs-pricing__grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(260px, 1fr)); gap: 1.5rem; align-items: start; max-width: 900px; margin: 0 auto; }
.cs-pricing__card { background: var(--surface, #fff); border: 2px solid var(--border, #E2E8F0); border-radius: calc(var(--radius, 8px) * 2); padding: 2rem; position: relative; }
.cs-pricing__card--featured { border-color: var(--primary, #2563EB); box-shadow: 0 20px 60px rgba(37,99,235,.15); transform: scale(1.04); }
.cs-pricing__badge { position: absolute; top: -12px; left: 50%; transform: translateX(-50%); background: var(--primary, #2563EB); color: #fff; font-size: .7rem; font-weight: 700; padding: .2rem .8rem; border-radius: 999px; white-space: nowrap; }
.cs-pricing__name { font-size: 1rem; font-weight: 700; color: var(--text-2, #64748B); text-transform: uppercase; letter-spacing: .08em; margin-bottom: .5rem; }
.cs-pricing__price { font-size: 2.4rem; font-weight: 800; letter-spacing: -.03em; margin-bottom: 1.5rem; }
.cs-pricing__feats { list-style: none; margin-bottom: 1.5rem; display: flex; flex-direction: column; gap: .6rem; }
.cs-pricing__feats li { font-size: .9rem; color: var(--text-2, #64748B); }
.cs-pricing__cta { width: 100%; justify-content: center; }
"""


def pricing_html(config: Mapping[str, Any]) -> str:
    c = merged(PRICING_DEFAULTS, config)
    featured = text(c.get("featured"))
    plans = []
    for i, key in enumerate(("plan1", "plan2", "plan3")):
        head, *features = split_list(c.get(key), ";") or [""]
        name, _, price = head.partition("|")
        plans.append({
            "name": name.strip() or f"Plan {i + 1}",
            "price": price.strip() or "–",
            "features": [f for f in features if f],
            "featured": featured == str(i),
        })
    return PRICING_HTML.render(title=text(c.get("title")), plans=plans)


# =============================================================================
# FAQ
# =============================================================================

FAQ_DEFAULTS = {
    "title": "Frequently Asked Questions",
    "items": (
        "What is pagecraft?|A block-based page builder that exports plain HTML, CSS and JavaScript.;"
        "Is it free to use?|Yes, for personal and commercial projects.;"
        "Do I need a build tool?|No. Link styles.css and script.js from your HTML and you are done.;"
        "Is it responsive?|Every block is mobile-first and fully responsive."
    ),
}

FAQ_HTML = template("""
<section class="cs-faq py-24">
  <div class="container cs-faq__container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2></div>
{% endif %}
    <div class="cs-faq__list">
{% for item in items %}
      <div class="cs-faq__item">
        <button class="cs-faq__q" aria-expanded="false" aria-controls="faq-a-{{ loop.index0 }}">
          <span>{{ item.question }}</span>
          <span class="cs-faq__arrow">›</span>
        </button>
        <div class="cs-faq__a" id="faq-a-{{ loop.index0 }}" hidden>{{ item.answer }}</div>
      </div>
{% endfor %}
    </div>
  </div>
</section>
""")

FAQ_CSS = SECTION_TITLE_CSS + """
.cs-faq__container { max-width: 720px; }
.cs-faq__list { display: flex; flex-direction: column; gap: .75rem; }
.cs-faq__item { background: var(--surface, #fff); border: 1px solid var(--border, #E2E8F0); border-radius: var(--radius, 8px); overflow: hidden; }
.cs-faq__q { width: 100%; display: flex; justify-content: space-between; align-items: center; gap: 1rem; padding: 1.1rem 1.25rem; background: none; border: none; cursor: pointer; font-size: .95rem; font-weight: 600; color: var(--text, #0F172A); text-align: left; }
.cs-faq__arrow { font-size: 1.3rem; transition: transform .25s; flex-shrink: 0; color: var(--text-2, #64748B); }
.cs-faq__item.is-open .cs-faq__arrow { transform: rotate(90deg); }
.cs-faq__a { padding: 0 1.25rem 1.1rem; font-size: .9rem; color: var(--text-2, #64748B); line-height: 1.7; }
"""

FAQ_JS = """
document.querySelectorAll('.cs-faq__q').forEach(btn => {
  btn.addEventListener('click', () => {
    const item = btn.closest('.cs-faq__item');
    const answer = item.querySelector('.cs-faq__a');
    const open = item.classList.toggle('is-open');
    btn.setAttribute('aria-expanded', open);
    answer.hidden = !open;
  });
});
"""


def faq_html(config: Mapping[str, Any]) -> str:
    c = merged(FAQ_DEFAULTS, config)
    items = [
        {"question": q or "Question", "answer": a or "Answer goes here."}
        for q, a in split_records(c.get("items"), 2)
    ]
    return FAQ_HTML.render(title=text(c.get("title")), items=items)


# =============================================================================
# TESTIMONIALS
# =============================================================================

TESTIMONIALS_DEFAULTS = {
    "title": "What Our Users Say",
    "items": (
        "Alex Rivera|Lead Developer at TechCorp|Saved us weeks of setup time. Zero config needed.|⭐⭐⭐⭐⭐;"
        "Mia Chen|Freelance Designer|A professional template system without the bloat.|⭐⭐⭐⭐⭐;"
        "James Park|Startup Founder|We shipped our MVP in record time.|⭐⭐⭐⭐⭐"
    ),
}

TESTIMONIALS_HTML = template("""
<section class="cs-testimonials py-24">
  <div class="container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2></div>
{% endif %}
    <div class="grid-3">
{% for t in items %}
      <div class="cs-testimonial">
        <div class="cs-testimonial__stars">{{ t.stars }}</div>
        <p class="cs-testimonial__quote">"{{ t.quote }}"</p>
        <div class="cs-testimonial__author">
          <div class="cs-testimonial__avatar">{{ t.initial }}</div>
          <div><div class="cs-testimonial__name">{{ t.name }}</div><div class="cs-testimonial__role">{{ t.role }}</div></div>
        </div>
      </div>
{% endfor %}
    </div>
  </div>
</section>
""")

TESTIMONIALS_CSS = SECTION_TITLE_CSS + """
.cs-testimonials { background: var(--bg, #F8FAFC); }
.cs-testimonial { background: var(--surface, #fff); border: 1px solid var(--border, #E2E8F0); border-radius: calc(var(--radius, 8px) * 1.5); padding: 1.75rem; }
.cs-testimonial__stars { margin-bottom: .75rem; font-size: .9rem; }
.cs-testimonial__quote { font-size: .95rem; color: var(--text, #0F172A); line-height: 1.7; margin-bottom: 1.25rem; font-style: italic; }
.cs-testimonial__author { display: flex; align-items: center; gap: .75rem; }
.cs-testimonial__avatar { width: 40px; height: 40px; border-radius: 50%; background: var(--primary, #2563EB); color: #fff; display: flex; align-items: center; justify-content: center; font-weight: 700; flex-shrink: 0; }
.cs-testimonial__name { font-size: .9rem; font-weight: 700; }
.cs-testimonial__role { font-size: .8rem; color: var(--text-2, #64748B); }
"""


def testimonials_html(config: Mapping[str, Any]) -> str:
    c = merged(TESTIMONIALS_DEFAULTS, config)
    items = [
        {
            "name": name,
            "role": role,
            "quote": quote,
            "stars": stars or "⭐⭐⭐⭐⭐",
            "initial": (name or "U")[0],
        }
        for name, role, quote, stars in split_records(c.get("items"), 4)
    ]
    return TESTIMONIALS_HTML.render(title=text(c.get("title")), items=items)


# =============================================================================
# CTA
# =============================================================================

CTA_DEFAULTS = {
    "title": "Ready to Build Something Great?",
    "subtitle": "Ship professional quality websites in record time.",
    "cta": "Get Started Free",
    "cta2": "View Documentation",
}

CTA_HTML = template("""
<section class="cs-cta py-24 text-center">
  <div class="container">
    <h2 class="cs-cta__title">{{ title }}</h2>
    <p class="cs-cta__sub">{{ subtitle }}</p>
    <div class="cs-cta__actions">
{% if cta %}
      <a href="#" class="btn cs-cta__btn-primary">{{ cta }}</a>
{% endif %}
{% if cta2 %}
      <a href="#" class="btn cs-cta__btn-outline">{{ cta2 }}</a>
{% endif %}
    </div>
  </div>
</section>
""")

CTA_CSS = """
.cs-cta { background: linear-gradient(135deg, var(--primary, #2563EB) 0%, var(--accent, #7C3AED) 100%); color: #fff; }
.cs-cta__title { font-size: clamp(1.8rem, 4vw, 2.8rem); font-weight: 800; letter-spacing: -.03em; margin-bottom: 1rem; }
.cs-cta__sub { font-size: 1.1rem; color: rgba(255,255,255,.85); max-width: 520px; margin: 0 auto 2.5rem; }
.cs-cta__actions { display: flex; gap: 1rem; justify-content: center; flex-wrap: wrap; }
.cs-cta__btn-primary { background: #fff; color: var(--primary, #2563EB); border-color: #fff; }
.cs-cta__btn-outline { color: #fff; border-color: rgba(255,255,255,.5); }
"""


def cta_html(config: Mapping[str, Any]) -> str:
    c = merged(CTA_DEFAULTS, config)
    return CTA_HTML.render(
        title=text(c.get("title")),
        subtitle=text(c.get("subtitle")),
        cta=text(c.get("cta")),
        cta2=text(c.get("cta2")),
    )


# =============================================================================
# STATS
# =============================================================================

STATS_DEFAULTS = {"items": "10K+|Active Users;98%|Satisfaction;50+|Components;0|Dependencies"}

STATS_HTML = template("""
<section class="cs-stats py-16">
  <div class="container">
    <div class="cs-stats__grid">
{% for s in items %}
      <div class="cs-stat"><div class="cs-stat__val" data-target="{{ s.value }}">{{ s.value }}</div><div class="cs-stat__label">{{ s.label }}</div></div>
{% endfor %}
    </div>
  </div>
</section>
""")

STATS_CSS = """
.cs-stats { background: var(--surface, #fff); border-top: 1px solid var(--border, #E2E8F0); border-bottom: 1px solid var(--border, #E2E8F0); }
.cs-stats__grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(150px, 1fr)); gap: 2rem; text-align: center; }
.cs-stat__val { font-size: 2.4rem; font-weight: 800; color: var(--primary, #2563EB); letter-spacing: -.03em; }
.cs-stat__label { font-size: .875rem; color: var(--text-2, #64748B); font-weight: 500; margin-top: .25rem; }
"""


def stats_html(config: Mapping[str, Any]) -> str:
    c = merged(STATS_DEFAULTS, config)
    items = [{"value": v, "label": label} for v, label in split_records(c.get("items"), 2)]
    return STATS_HTML.render(items=items)


# =============================================================================
# CARDS
# =============================================================================

CARDS_DEFAULTS = {
    "title": "Our Services",
    "cols": "3",
    "items": (
        "Web Design|Professional UI/UX design that converts visitors into customers.;"
        "Development|Clean, maintainable code built on modern web standards.;"
        "Consulting|Expert guidance on architecture, performance, and scalability."
    ),
}

CARDS_HTML = template("""
<section class="cs-cards py-24">
  <div class="container">
{% if title %}
    <div class="text-center mb-8"><h2 class="cs-section-title">{{ title }}</h2></div>
{% endif %}
    <div class="grid-{{ cols }}">
{% for item in items %}
      <div class="cs-card">
        <div class="cs-card__header"></div>
        <div class="cs-card__body">
          <h3 class="cs-card__title">{{ item.title }}</h3>
          <p class="cs-card__desc">{{ item.desc }}</p>
          <a href="#" class="cs-card__link">Learn more →</a>
        </div>
      </div>
{% endfor %}
    </div>
  </div>
</section>
""")

CARDS_CSS = SECTION_TITLE_CSS + """
.cs-card { background: var(--surface, #fff); border: 1px solid var(--border, #E2E8F0); border-radius: calc(var(--radius, 8px) * 1.5); overflow: hidden; transition: box-shadow .25s, transform .25s; }
.cs-card:hover { box-shadow: 0 16px 40px rgba(0,0,0,.1); transform: translateY(-4px); }
.cs-card__header { height: 160px; background: linear-gradient(135deg, var(--primary, #2563EB), var(--accent, #7C3AED)); }
.cs-card__body { padding: 1.5rem; }
.cs-card__title { font-size: 1rem; font-weight: 700; margin-bottom: .5rem; }
.cs-card__desc { font-size: .875rem; color: var(--text-2, #64748B); line-height: 1.65; margin-bottom: 1rem; }
.cs-card__link { font-size: .875rem; font-weight: 600; color: var(--primary, #2563EB); }
"""


def cards_html(config: Mapping[str, Any]) -> str:
    c = merged(CARDS_DEFAULTS, config)
    items = [
        {"title": t or "Card Title", "desc": d or "Card description goes here."}
        for t, d in split_records(c.get("items"), 2)
    ]
    return CARDS_HTML.render(title=text(c.get("title")), cols=grid_columns(c.get("cols")), items=items)


def register_content_blocks(registry: "BlockRegistry") -> None:
    """Register the content section blocks."""

    registry.register(BlockDefinition(
        type_id="hero", name="Hero Section", icon="★", category="content",
        description="Hero section with headline, subtitle and call to action",
        default_config=HERO_DEFAULTS, html=hero_html, css=lambda c: HERO_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="features", name="Feature Grid", icon="⊞", category="content",
        description="Feature grid with icons and descriptions",
        default_config=FEATURES_DEFAULTS, html=features_html, css=lambda c: FEATURES_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="pricing", name="Pricing Table", icon="💲", category="content",
        description="Pricing table with three plans",
        default_config=PRICING_DEFAULTS, html=pricing_html, css=lambda c: PRICING_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="faq", name="FAQ Accordion", icon="?", category="content",
        description="Frequently asked questions in an accordion",
        default_config=FAQ_DEFAULTS, html=faq_html, css=lambda c: FAQ_CSS, js=lambda c: FAQ_JS,
    ))

    registry.register(BlockDefinition(
        type_id="testimonials", name="Testimonials", icon="❝", category="content",
        description="Customer testimonial cards",
        default_config=TESTIMONIALS_DEFAULTS, html=testimonials_html, css=lambda c: TESTIMONIALS_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="cta", name="CTA Section", icon="→", category="content",
        description="Call to action on a gradient background",
        default_config=CTA_DEFAULTS, html=cta_html, css=lambda c: CTA_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="stats", name="Stats / Metrics", icon="📊", category="content",
        description="Key numbers in a row",
        default_config=STATS_DEFAULTS, html=stats_html, css=lambda c: STATS_CSS,
    ))

    registry.register(BlockDefinition(
        type_id="cards", name="Card Grid", icon="▦", category="content",
        description="Card grid with title and description",
        default_config=CARDS_DEFAULTS, html=cards_html, css=lambda c: CARDS_CSS,
    ))
