"""Shared jinja2 environment and config helpers for library blocks."""

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, BaseLoader, StrictUndefined, Template

_env = Environment(
    loader=BaseLoader(),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)

FALSE_STRINGS = frozenset({"", "0", "false", "no", "off", "none"})


def template(source: str) -> Template:
    """Compile an inline template once, at import time of the block module."""
    return _env.from_string(source)


def merged(defaults: Mapping[str, Any], config: Mapping[str, Any]) -> dict[str, Any]:
    """Instance config over block defaults."""
    return {**defaults, **config}


def text(value: Any, fallback: str = "") -> str:
    """Config value as display text; empty and missing values use ``fallback``."""
    if value is None or value is False:
        return fallback
    if value is True:
        return "true"
    result = str(value)
    return result if result else fallback


def flag(value: Any) -> bool:
    """Config value as a boolean; ``"false"``/``"0"``/``"off"`` strings are false."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def split_list(value: Any, sep: str) -> list[str]:
    """Split a delimited config string, trimming every part."""
    return [part.strip() for part in text(value).split(sep)] if text(value) else []


def split_records(value: Any, fields: int) -> list[list[str]]:
    """
    Parse ``a|b;c|d`` style config into records of exactly ``fields`` parts.

    Missing parts are padded with empty strings.
    """
    records = []
    for raw in split_list(value, ";"):
        parts = [p.strip() for p in raw.split("|")]
        parts += [""] * (fields - len(parts))
        records.append(parts[:fields])
    return records
