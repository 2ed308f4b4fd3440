"""
Block Registry
Central registry mapping block type ids to their definitions
"""

from typing import Any

from pagecraft.core import get_logger, new_block_id
from pagecraft.models import BlockInstance, ConfigValue
from .types import BlockDefinition

logger = get_logger(__name__)


class BlockRegistry:
    """
    Registry of block definitions plus the shared base stylesheet.

    Lookups never mutate the registry and are safe to repeat.
    """

    def __init__(self, base_css: str = ""):
        self.blocks: dict[str, BlockDefinition] = {}
        self._base_css = base_css

    def register(self, definition: BlockDefinition) -> None:
        """Register a block definition, replacing any with the same id."""
        if definition.type_id in self.blocks:
            logger.warning("block_replaced", type_id=definition.type_id)
        self.blocks[definition.type_id] = definition
        logger.debug("block_registered", type_id=definition.type_id, name=definition.name)

    def unregister(self, type_id: str) -> None:
        """Unregister a block type."""
        if self.blocks.pop(type_id, None) is not None:
            logger.info("block_unregistered", type_id=type_id)

    def lookup(self, type_id: str) -> BlockDefinition | None:
        """Get block definition by type id."""
        return self.blocks.get(type_id)

    def base_stylesheet(self) -> str:
        """Stylesheet emitted ahead of every block's CSS."""
        return self._base_css

    def set_base_stylesheet(self, css: str) -> None:
        self._base_css = css

    def list_all(self, category: str | None = None) -> list[BlockDefinition]:
        """List definitions in registration order, optionally filtered by category."""
        blocks = list(self.blocks.values())
        if category:
            blocks = [b for b in blocks if b.category == category]
        return blocks

    def categories(self) -> list[str]:
        return sorted({b.category for b in self.blocks.values()})

    def create_instance(self, type_id: str, /, **overrides: ConfigValue) -> BlockInstance:
        """
        Create a new placed instance with the definition's default config.

        Args:
            type_id: Registered block type
            **overrides: Config values replacing the defaults

        Returns:
            BlockInstance with a fresh ``blk_`` instance id

        Raises:
            KeyError: If the type is not registered
        """
        definition = self.lookup(type_id)
        if definition is None:
            raise KeyError(f"Unknown block type: {type_id}")
        return BlockInstance(
            type_id=type_id,
            config={**definition.default_config, **overrides},
            instance_id=new_block_id(),
        )

    def get_stats(self) -> dict[str, Any]:
        """Get registry statistics"""
        categories: dict[str, int] = {}
        for block in self.blocks.values():
            categories[block.category] = categories.get(block.category, 0) + 1
        return {
            "total_blocks": len(self.blocks),
            "categories": categories,
            "type_ids": list(self.blocks.keys()),
        }

    def __contains__(self, type_id: str) -> bool:
        return type_id in self.blocks

    def __len__(self) -> int:
        return len(self.blocks)
