"""Page Data Models."""

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


ConfigValue = bool | int | float | str
"""Scalar types a block configuration value may take."""


class BlockInstance(BaseModel):
    """One placed block: a registry type plus its own configuration."""

    model_config = ConfigDict(frozen=True, strict=True)

    type_id: str = Field(..., min_length=1, description="Block Registry key")
    config: dict[str, ConfigValue] = Field(default_factory=dict)
    instance_id: str | None = Field(default=None, description="Caller-side handle")

    def structure(self) -> tuple[str, dict[str, ConfigValue]]:
        """Structural identity: type and configuration, without the handle."""
        return self.type_id, dict(self.config)

    @classmethod
    def coerce(cls, value: "BlockInstance | Mapping[str, Any]") -> "BlockInstance":
        """Accept an instance or a plain mapping (``type_id`` or legacy ``id`` key)."""
        if isinstance(value, BlockInstance):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"Expected BlockInstance or mapping, got {type(value).__name__}")
        data = dict(value)
        if "type_id" not in data and "id" in data:
            data["type_id"] = data.pop("id")
        return cls.model_validate(
            {
                "type_id": data.get("type_id"),
                "config": dict(data.get("config") or {}),
                "instance_id": data.get("instance_id"),
            }
        )


def structurally_equal(left: Sequence[BlockInstance], right: Sequence[BlockInstance]) -> bool:
    """Same ordered type ids and same config key/value pairs."""
    if len(left) != len(right):
        return False
    return all(a.structure() == b.structure() for a, b in zip(left, right))


class DSLError(BaseModel):
    """A syntax error in DSL source."""

    model_config = ConfigDict(frozen=True)

    message: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.line}:{self.column}: {self.message}"


class CompileResult(BaseModel):
    """Outcome of compiling DSL source. ``instances`` is empty whenever ``errors`` is not."""

    model_config = ConfigDict(frozen=True)

    instances: list[BlockInstance] = Field(default_factory=list)
    errors: list[DSLError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Theme(BaseModel):
    """Visual theme passed through to the output compiler."""

    model_config = ConfigDict(frozen=True)

    primary_color: str = Field(default="#2563EB", pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")
    secondary_color: str = Field(default="#7C3AED", pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")
    bg_color: str = Field(default="#F8FAFC")
    text_color: str = Field(default="#0F172A")
    mode: Literal["light", "dark"] = "light"
    radius: Literal["sm", "md", "lg", "xl"] = "md"
    shadow: bool = True
    font: Literal["system", "mono", "serif"] = "system"


class PageSettings(BaseModel):
    """Page-level generation settings; unknown keys are kept as-is."""

    model_config = ConfigDict(frozen=True, extra="allow")

    columns: int = 3
    navbar: str = "sticky"
    footer: str = "corporate"
    animations: bool = True
    max_width: str = "1200px"
    spacing: str = "comfortable"
    title: str | None = None
    description: str | None = None


class Meta(BaseModel):
    """Structural summary of one resolution pass."""

    model_config = ConfigDict(frozen=True)

    block_count: int = 0
    type_ids: tuple[str, ...] = ()
    has_nav: bool = False
    has_footer: bool = False


class Diagnostic(BaseModel):
    """Non-fatal resolution problem attached to one instance."""

    model_config = ConfigDict(frozen=True)

    index: int
    type_id: str
    instance_id: str | None = None
    stage: Literal["lookup", "html", "css", "js"]
    message: str


class RenderTree(BaseModel):
    """Resolved, deduplicated fragments between block instances and final output."""

    model_config = ConfigDict(frozen=True)

    html: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    js: tuple[str, ...] = ()
    meta: Meta = Field(default_factory=Meta)
    diagnostics: tuple[Diagnostic, ...] = ()


class GeneratedOutput(BaseModel):
    """Final artifact triplet."""

    model_config = ConfigDict(frozen=True)

    html: str
    css: str
    js: str


class GenerationResult(BaseModel):
    """Artifacts of a full generation pass with advisory findings."""

    model_config = ConfigDict(frozen=True)

    html: str
    css: str
    js: str
    warnings: list[str] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def output(self) -> GeneratedOutput:
        return GeneratedOutput(html=self.html, css=self.css, js=self.js)
