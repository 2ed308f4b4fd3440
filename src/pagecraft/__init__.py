"""
pagecraft - block-based static page generation.

DSL text <-> block instances -> render tree -> HTML/CSS/JS.
"""

from .models import (
    BlockInstance,
    CompileResult,
    ConfigValue,
    DSLError,
    Diagnostic,
    GeneratedOutput,
    GenerationResult,
    Meta,
    PageSettings,
    RenderTree,
    Theme,
    structurally_equal,
)
from .dsl import compile_dsl, serialize_dsl
from .blocks import BlockDefinition, BlockRegistry, create_default_registry
from .pipeline import PageGenerator, TemplateOutputCompiler, OutputCompiler, resolve, validate
from .canvas import Canvas

__version__ = "0.1.0"

__all__ = [
    "BlockInstance",
    "CompileResult",
    "ConfigValue",
    "DSLError",
    "Diagnostic",
    "GeneratedOutput",
    "GenerationResult",
    "Meta",
    "PageSettings",
    "RenderTree",
    "Theme",
    "structurally_equal",
    "compile_dsl",
    "serialize_dsl",
    "BlockDefinition",
    "BlockRegistry",
    "create_default_registry",
    "PageGenerator",
    "TemplateOutputCompiler",
    "OutputCompiler",
    "resolve",
    "validate",
    "Canvas",
]
