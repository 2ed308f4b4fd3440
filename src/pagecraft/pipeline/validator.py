"""
Layout Validator
Advisory ordering checks for landmark blocks
"""

from collections.abc import Sequence

from pagecraft.models import BlockInstance

FOOTER_NOT_LAST = "Footer should be the last block."
NAVBAR_NOT_FIRST = "Navbar should be the first block."
MISSING_FOOTER = "Consider adding a footer block."
MISSING_NAVBAR = "Consider adding a navbar block."


def validate(
    instances: Sequence[BlockInstance],
    nav_type: str = "navbar",
    footer_type: str = "footer",
) -> list[str]:
    """
    Check landmark placement.

    Each rule is evaluated independently and every applicable warning is
    reported, in rule order. Positions refer to the first occurrence of a
    landmark type. Warnings never block generation.

    Args:
        instances: Ordered block instances
        nav_type: Type id expected first
        footer_type: Type id expected last

    Returns:
        Warning messages, empty when the layout is well formed
    """
    type_ids = [instance.type_id for instance in instances]
    warnings: list[str] = []

    if footer_type in type_ids and type_ids.index(footer_type) != len(type_ids) - 1:
        warnings.append(FOOTER_NOT_LAST)
    if nav_type in type_ids and type_ids.index(nav_type) != 0:
        warnings.append(NAVBAR_NOT_FIRST)
    if footer_type not in type_ids:
        warnings.append(MISSING_FOOTER)
    if nav_type not in type_ids:
        warnings.append(MISSING_NAVBAR)

    return warnings
