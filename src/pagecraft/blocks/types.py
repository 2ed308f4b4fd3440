"""
Block Type Definitions
Block definitions and the registry interface the resolver consumes
"""

from collections.abc import Callable, Mapping
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field
from returns.result import Result

from pagecraft.core import capture
from pagecraft.models import ConfigValue

TemplateFn = Callable[[Mapping[str, Any]], str]
Part = Literal["html", "css", "js"]


def no_output(config: Mapping[str, Any]) -> str:
    """Template for blocks that contribute nothing to a part."""
    return ""


class BlockDefinition(BaseModel):
    """
    A block type's behavior, shared by all its instances.

    ``html``, ``css`` and ``js`` must be pure: the same config yields the
    same text. CSS/JS deduplication by type relies on it.
    """

    model_config = ConfigDict(frozen=True)

    type_id: str = Field(..., min_length=1, description="Registry key")
    name: str = Field(..., description="Display name")
    icon: str = Field(default="□")
    category: str = Field(default="content")
    description: str = Field(default="")
    default_config: dict[str, ConfigValue] = Field(default_factory=dict)
    html: TemplateFn
    css: TemplateFn = no_output
    js: TemplateFn = no_output

    def render(self, part: Part, config: Mapping[str, Any]) -> Result[str, Exception]:
        """Invoke one template function; failures come back as ``Failure``."""
        fn: TemplateFn = getattr(self, part)
        return capture(fn, dict(config))


class BlockSource(Protocol):
    """What the resolver needs from a registry."""

    def lookup(self, type_id: str) -> BlockDefinition | None:
        ...

    def base_stylesheet(self) -> str:
        ...
