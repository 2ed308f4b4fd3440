"""
Canvas
Caller-side owner of the ordered block list and the last generated output
"""

import threading
from collections.abc import Iterable, Mapping
from typing import Literal

from pagecraft.core import get_logger, new_block_id
from pagecraft.blocks.registry import BlockRegistry
from pagecraft.models import BlockInstance, ConfigValue, GeneratedOutput

logger = get_logger(__name__)

Direction = Literal["up", "down"]


class Canvas:
    """
    Mutable block list for an editing session.

    The pipeline never holds a reference to this object; callers pass
    ``canvas.blocks`` (an immutable snapshot) into generation and use
    ``canvas.replace_blocks`` as the ``apply`` callback of ``import_dsl``.
    """

    def __init__(self, registry: BlockRegistry):
        self.registry = registry
        self._blocks: list[BlockInstance] = []
        self._generated: GeneratedOutput | None = None
        self._lock = threading.RLock()

    @property
    def blocks(self) -> tuple[BlockInstance, ...]:
        with self._lock:
            return tuple(self._blocks)

    @property
    def generated(self) -> GeneratedOutput | None:
        with self._lock:
            return self._generated

    def get_block(self, instance_id: str) -> BlockInstance | None:
        with self._lock:
            index = self._index(instance_id)
            return self._blocks[index] if index >= 0 else None

    def add_block(
        self,
        type_id: str,
        after: str | None = None,
        config: Mapping[str, ConfigValue] | None = None,
    ) -> str:
        """
        Place a new block with the type's default config.

        Args:
            type_id: Registered block type
            after: Instance id to insert after; appends when omitted
            config: Config overrides merged over the type defaults

        Returns:
            The new instance id

        Raises:
            KeyError: If the type or the ``after`` instance is unknown
        """
        instance = self.registry.create_instance(type_id, **dict(config or {}))
        with self._lock:
            if after is None:
                self._blocks.append(instance)
            else:
                index = self._index(after)
                if index < 0:
                    raise KeyError(f"Unknown block instance: {after}")
                self._blocks.insert(index + 1, instance)

        logger.debug("block_added", type_id=type_id, instance_id=instance.instance_id)
        return instance.instance_id

    def remove_block(self, instance_id: str) -> bool:
        with self._lock:
            index = self._index(instance_id)
            if index < 0:
                return False
            del self._blocks[index]
        logger.debug("block_removed", instance_id=instance_id)
        return True

    def move_block(self, instance_id: str, direction: Direction) -> bool:
        """Swap a block with its neighbour; no-op at either end of the list."""
        if direction not in ("up", "down"):
            raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")
        with self._lock:
            index = self._index(instance_id)
            if index < 0:
                return False
            target = index - 1 if direction == "up" else index + 1
            if not 0 <= target < len(self._blocks):
                return False
            self._blocks[index], self._blocks[target] = self._blocks[target], self._blocks[index]
        return True

    def update_config(self, instance_id: str, key: str, value: ConfigValue) -> bool:
        """Set one config value; instances are immutable so the entry is replaced."""
        with self._lock:
            index = self._index(instance_id)
            if index < 0:
                return False
            current = self._blocks[index]
            self._blocks[index] = BlockInstance(
                type_id=current.type_id,
                config={**current.config, key: value},
                instance_id=current.instance_id,
            )
        return True

    def replace_blocks(self, instances: Iterable[BlockInstance]) -> None:
        """Swap in a whole new list, assigning ids to instances that lack one."""
        fresh = [
            i if i.instance_id else i.model_copy(update={"instance_id": new_block_id()})
            for i in instances
        ]
        with self._lock:
            self._blocks = fresh
        logger.info("blocks_replaced", blocks=len(fresh))

    def clear(self) -> None:
        with self._lock:
            self._blocks = []

    def set_generated(self, output: GeneratedOutput) -> None:
        with self._lock:
            self._generated = output

    def _index(self, instance_id: str) -> int:
        for i, block in enumerate(self._blocks):
            if block.instance_id == instance_id:
                return i
        return -1

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)
