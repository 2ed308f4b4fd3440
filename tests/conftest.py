"""Pytest configuration and fixtures."""

import os

import pytest

from pagecraft.core import Settings, get_settings
from pagecraft.blocks import BlockRegistry, create_default_registry
from pagecraft.canvas import Canvas
from pagecraft.models import BlockInstance, PageSettings, Theme
from pagecraft.pipeline import PageGenerator, TemplateOutputCompiler


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["PAGECRAFT_LOG_LEVEL"] = "DEBUG"
    os.environ["PAGECRAFT_JSON_LOGS"] = "false"
    get_settings.cache_clear()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings()


@pytest.fixture
def registry() -> BlockRegistry:
    """Registry with the default block library."""
    return create_default_registry()


@pytest.fixture
def output_compiler() -> TemplateOutputCompiler:
    return TemplateOutputCompiler()


@pytest.fixture
def generator(registry, output_compiler, settings) -> PageGenerator:
    """Page generator wired with the default library."""
    return PageGenerator(registry=registry, output_compiler=output_compiler, settings=settings)


@pytest.fixture
def canvas(registry) -> Canvas:
    return Canvas(registry)


# ============================================================================
# Model Fixtures
# ============================================================================

@pytest.fixture
def theme() -> Theme:
    return Theme()


@pytest.fixture
def page_settings() -> PageSettings:
    return PageSettings(title="Test Page", description="Test description")


@pytest.fixture
def landing_blocks() -> list[BlockInstance]:
    """A well-formed landing page."""
    return [
        BlockInstance(type_id="navbar", config={"brand": "Acme"}),
        BlockInstance(type_id="hero", config={"title": "Welcome"}),
        BlockInstance(type_id="faq"),
        BlockInstance(type_id="footer", config={"brand": "Acme", "year": 2024}),
    ]


@pytest.fixture
def sample_dsl():
    """Sample layout source."""
    return """
// Landing page
layout {
  navbar(brand: "Acme", sticky: true)
  hero {
    title: "Ship faster",
    cta: 'Start now'
  }
  features(cols: 4)
  pricing(featured: 2, title: "Plans")
  footer(year: 2024)
}
"""
