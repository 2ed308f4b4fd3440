"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    PagecraftError,
    ValidationError,
    PreconditionError,
    DSLSerializationError,
    validate_source_size,
    capture,
)
from .logging_config import configure_logging, get_logger, LogContext
from .id import BlockID, GenerationID, new_block_id, new_generation_id


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors / validation
    "PagecraftError",
    "ValidationError",
    "PreconditionError",
    "DSLSerializationError",
    "validate_source_size",
    "capture",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # IDs
    "BlockID",
    "GenerationID",
    "new_block_id",
    "new_generation_id",
    # DI
    "create_container",
]
