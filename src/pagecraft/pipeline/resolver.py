"""
Structural Resolver
Turns an ordered instance list into a deduplicated RenderTree
"""

from collections.abc import Sequence

from returns.result import Success

from pagecraft.core import get_logger
from pagecraft.blocks.types import BlockSource, BlockDefinition, Part
from pagecraft.models import BlockInstance, Diagnostic, Meta, RenderTree

logger = get_logger(__name__)

NAV_TYPE = "navbar"
FOOTER_TYPE = "footer"


def css_banner(name: str) -> str:
    return f"/* --- {name} --- */"


class Resolver:
    """
    Single resolution pass.

    HTML is collected per instance in input order. CSS and JS are collected
    once per distinct type id, at the type's first resolved occurrence.
    """

    def __init__(self, registry: BlockSource, nav_type: str = NAV_TYPE, footer_type: str = FOOTER_TYPE):
        self.registry = registry
        self.nav_type = nav_type
        self.footer_type = footer_type

    def resolve(self, instances: Sequence[BlockInstance]) -> RenderTree:
        html: list[str] = []
        css: list[str] = [self.registry.base_stylesheet()]
        js: list[str] = []
        seen: set[str] = set()
        resolved_types: list[str] = []
        diagnostics: list[Diagnostic] = []

        for index, instance in enumerate(instances):
            definition = self.registry.lookup(instance.type_id)
            if definition is None:
                logger.warning("unknown_block", type_id=instance.type_id, index=index)
                diagnostics.append(Diagnostic(
                    index=index,
                    type_id=instance.type_id,
                    instance_id=instance.instance_id,
                    stage="lookup",
                    message=f"Unknown block type: {instance.type_id}",
                ))
                continue

            resolved_types.append(instance.type_id)

            fragment = self._render(definition, "html", instance, index, diagnostics)
            if fragment:
                html.append(fragment)

            if instance.type_id in seen:
                continue
            seen.add(instance.type_id)

            style = self._render(definition, "css", instance, index, diagnostics)
            if style:
                css.append(f"{css_banner(definition.name)}\n{style}")

            script = self._render(definition, "js", instance, index, diagnostics)
            if script:
                js.append(script)

        meta = Meta(
            block_count=len(instances),
            type_ids=tuple(resolved_types),
            has_nav=self.nav_type in resolved_types,
            has_footer=self.footer_type in resolved_types,
        )

        logger.debug(
            "resolved",
            block_count=meta.block_count,
            html_fragments=len(html),
            css_fragments=len(css),
            js_fragments=len(js),
            diagnostics=len(diagnostics),
        )

        return RenderTree(
            html=tuple(html),
            css=tuple(css),
            js=tuple(js),
            meta=meta,
            diagnostics=tuple(diagnostics),
        )

    def _render(
        self,
        definition: BlockDefinition,
        part: Part,
        instance: BlockInstance,
        index: int,
        diagnostics: list[Diagnostic],
    ) -> str:
        """Run one template; a failure is recorded and yields empty text."""
        result = definition.render(part, instance.config)
        match result:
            case Success(text) if isinstance(text, str):
                return text.strip()
            case Success(other):
                error: Exception = TypeError(
                    f"{part} template returned {type(other).__name__}, expected str"
                )
            case _:
                error = result.failure()

        logger.error(
            "template_failed",
            type_id=instance.type_id,
            index=index,
            part=part,
            error=str(error),
        )
        diagnostics.append(Diagnostic(
            index=index,
            type_id=instance.type_id,
            instance_id=instance.instance_id,
            stage=part,
            message=f"{type(error).__name__}: {error}",
        ))
        return ""


def resolve(
    instances: Sequence[BlockInstance],
    registry: BlockSource,
    nav_type: str = NAV_TYPE,
    footer_type: str = FOOTER_TYPE,
) -> RenderTree:
    """
    Resolve instances against a registry.

    Never raises for registry misses or template failures; those become
    ``Diagnostic`` entries on the returned tree.
    """
    return Resolver(registry, nav_type, footer_type).resolve(instances)
