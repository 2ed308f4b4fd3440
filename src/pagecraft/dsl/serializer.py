"""DSL Serializer - block instances back to canonical layout source."""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pagecraft.core import DSLSerializationError
from pagecraft.models import BlockInstance
from .lexer import is_identifier
from .parser import LAYOUT_KEYWORD

INDENT = "  "
EMPTY_DOCUMENT = f"{LAYOUT_KEYWORD} {{\n{INDENT}// Add blocks here\n}}"

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def quote(text: str) -> str:
    """Double-quote ``text`` so the lexer decodes it back unchanged."""
    out = ['"']
    for ch in text:
        if ch in ESCAPES:
            out.append(ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def format_key(key: Any) -> str:
    if not isinstance(key, str):
        raise DSLSerializationError(f"Configuration key must be str, got {type(key).__name__}")
    return key if is_identifier(key) else quote(key)


def format_value(key: str, value: Any) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError as e:
            raise DSLSerializationError(f"Integer value for '{key}' is too large to serialize") from e
    if isinstance(value, float):
        if not math.isfinite(value):
            raise DSLSerializationError(f"Value for '{key}' is not a finite number: {value!r}")
        return repr(value)
    if isinstance(value, str):
        return quote(value)
    raise DSLSerializationError(
        f"Value for '{key}' has unsupported type {type(value).__name__}; "
        "expected str, int, float or bool"
    )


def format_declaration(instance: BlockInstance) -> str:
    type_id = instance.type_id
    if not isinstance(type_id, str) or not is_identifier(type_id):
        raise DSLSerializationError(f"Block type {type_id!r} is not a valid DSL identifier")

    config: Mapping[str, Any] = instance.config or {}
    args = ", ".join(f"{format_key(k)}: {format_value(k, v)}" for k, v in config.items())
    return f"{type_id}({args})"


def serialize_dsl(instances: Iterable[BlockInstance | Mapping[str, Any]]) -> str:
    """
    Serialize block instances to canonical DSL text.

    Compiling the result yields a structurally equal block list.

    Args:
        instances: Ordered block instances (or mappings accepted by ``BlockInstance.coerce``)

    Returns:
        DSL source wrapped in ``layout { ... }``

    Raises:
        DSLSerializationError: If a type id, key or value cannot be expressed in the DSL
    """
    try:
        blocks = [BlockInstance.coerce(item) for item in instances]
    except (TypeError, ValueError) as e:
        raise DSLSerializationError(f"Invalid block instance: {e}") from e

    if not blocks:
        return EMPTY_DOCUMENT

    lines = [f"{INDENT}{format_declaration(block)}" for block in blocks]
    return f"{LAYOUT_KEYWORD} {{\n" + "\n".join(lines) + "\n}"
