"""Block definitions, registry and the default library."""

from .types import BlockDefinition, BlockSource, TemplateFn, no_output
from .registry import BlockRegistry
from .library import create_default_registry

__all__ = [
    "BlockDefinition",
    "BlockSource",
    "TemplateFn",
    "no_output",
    "BlockRegistry",
    "create_default_registry",
]
