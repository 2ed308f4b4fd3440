"""
Default block library.

Layout landmarks (navbar, footer, section) and content sections (hero,
features, pricing, faq, testimonials, cta, stats, cards).
"""

from ..registry import BlockRegistry
from .base import BASE_CSS
from .layout_blocks import register_layout_blocks
from .content_blocks import register_content_blocks


def create_default_registry() -> BlockRegistry:
    """Create a registry holding the full default library and base stylesheet."""
    registry = BlockRegistry(base_css=BASE_CSS)
    register_layout_blocks(registry)
    register_content_blocks(registry)
    return registry


__all__ = [
    "BASE_CSS",
    "create_default_registry",
    "register_layout_blocks",
    "register_content_blocks",
]
