"""
Page Generator
Orchestrates validation, resolution and output compilation
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pagecraft.core import Settings, LogContext, PreconditionError, get_logger, new_generation_id
from pagecraft.blocks.types import BlockSource
from pagecraft.dsl import compile_dsl, serialize_dsl
from pagecraft.models import (
    BlockInstance,
    DSLError,
    GenerationResult,
    PageSettings,
    RenderTree,
    Theme,
)
from .output import OutputCompiler
from .resolver import Resolver
from .validator import validate as validate_layout

logger = get_logger(__name__)

InstanceLike = BlockInstance | Mapping[str, Any]


def snapshot(instances: Iterable[InstanceLike]) -> tuple[BlockInstance, ...]:
    """
    Copy caller instances into an immutable tuple.

    Raises:
        PreconditionError: If an entry is not a valid block instance
    """
    if isinstance(instances, (str, bytes)) or isinstance(instances, Mapping):
        raise PreconditionError(f"Expected a sequence of block instances, got {type(instances).__name__}")
    try:
        return tuple(BlockInstance.coerce(item).model_copy(deep=True) for item in instances)
    except (TypeError, PydanticValidationError) as e:
        raise PreconditionError(f"Invalid block instance: {e}") from e


def _coerce_theme(theme: Theme | Mapping[str, Any] | None) -> Theme:
    if theme is None:
        return Theme()
    if isinstance(theme, Theme):
        return theme
    try:
        return Theme.model_validate(dict(theme))
    except PydanticValidationError as e:
        raise PreconditionError(f"Invalid theme: {e}") from e


def _coerce_settings(settings: PageSettings | Mapping[str, Any] | None) -> PageSettings:
    if settings is None:
        return PageSettings()
    if isinstance(settings, PageSettings):
        return settings
    try:
        return PageSettings.model_validate(dict(settings))
    except PydanticValidationError as e:
        raise PreconditionError(f"Invalid page settings: {e}") from e


class PageGenerator:
    """
    Caller-facing pipeline API.

    Holds no mutable state of its own: every call works on a snapshot of
    the instances taken at call start, so concurrent edits by the caller
    cannot affect a pass already in progress.
    """

    def __init__(
        self,
        registry: BlockSource,
        output_compiler: OutputCompiler,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry
        self.output_compiler = output_compiler
        self.settings = settings or Settings()
        self.resolver = Resolver(
            registry,
            nav_type=self.settings.nav_block_type,
            footer_type=self.settings.footer_block_type,
        )

        logger.info("initialized", compiler=type(output_compiler).__name__)

    def generate(
        self,
        instances: Iterable[InstanceLike],
        theme: Theme | Mapping[str, Any] | None = None,
        page_settings: PageSettings | Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """
        Run the full pass: validate, resolve, compile.

        Warnings and diagnostics are reported alongside the output and
        never prevent generation.
        """
        blocks = snapshot(instances)
        theme_ = _coerce_theme(theme)
        settings_ = _coerce_settings(page_settings)

        with LogContext(generation_id=new_generation_id()):
            warnings = self._validate(blocks)
            tree = self.resolver.resolve(blocks)
            output = self.output_compiler.compile_full(tree, theme_, settings_)

            logger.info(
                "generated",
                blocks=len(blocks),
                warnings=len(warnings),
                diagnostics=len(tree.diagnostics),
            )

        return GenerationResult(
            html=output.html,
            css=output.css,
            js=output.js,
            warnings=warnings,
            diagnostics=list(tree.diagnostics),
        )

    def preview(
        self,
        instances: Iterable[InstanceLike],
        theme: Theme | Mapping[str, Any] | None = None,
        page_settings: PageSettings | Mapping[str, Any] | None = None,
    ) -> str:
        """Single self-contained document with inlined styles and scripts."""
        blocks = snapshot(instances)
        theme_ = _coerce_theme(theme)
        settings_ = _coerce_settings(page_settings)

        with LogContext(generation_id=new_generation_id()):
            tree = self.resolver.resolve(blocks)
            document = self.output_compiler.compile_for_preview(tree, theme_, settings_)
            logger.debug("previewed", blocks=len(blocks), diagnostics=len(tree.diagnostics))

        return document

    def import_dsl(self, source: str, apply: Callable[[list[BlockInstance]], Any]) -> list[DSLError]:
        """
        Compile DSL and hand the result to ``apply``.

        Replace-or-noop: ``apply`` is called exactly once with the full
        compiled list on success, and never on failure.

        Returns:
            Compile errors, empty on success
        """
        result = compile_dsl(source, max_length=self.settings.max_source_length)
        if not result.ok:
            logger.info("import_rejected", errors=len(result.errors))
            return list(result.errors)

        apply(list(result.instances))
        logger.info("imported", blocks=len(result.instances))
        return []

    def export_dsl(self, instances: Iterable[InstanceLike]) -> str:
        """Serialize instances to DSL text."""
        return serialize_dsl(instances)

    def validate(self, instances: Iterable[InstanceLike]) -> list[str]:
        return self._validate(snapshot(instances))

    def resolve(self, instances: Iterable[InstanceLike]) -> RenderTree:
        return self.resolver.resolve(snapshot(instances))

    def _validate(self, blocks: tuple[BlockInstance, ...]) -> list[str]:
        warnings = validate_layout(
            blocks,
            nav_type=self.settings.nav_block_type,
            footer_type=self.settings.footer_block_type,
        )
        if warnings:
            logger.debug("layout_warnings", warnings=warnings)
        return warnings
