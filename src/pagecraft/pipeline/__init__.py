"""Generation pipeline: resolver, validator, output compiler and orchestrator."""

from .resolver import Resolver, resolve
from .validator import validate
from .theme import theme_css, darken, lighten
from .output import OutputCompiler, TemplateOutputCompiler
from .generator import PageGenerator, snapshot

__all__ = [
    "Resolver",
    "resolve",
    "validate",
    "theme_css",
    "darken",
    "lighten",
    "OutputCompiler",
    "TemplateOutputCompiler",
    "PageGenerator",
    "snapshot",
]
