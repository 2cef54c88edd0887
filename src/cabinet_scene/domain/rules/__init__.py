"""Style rules for cabinet construction.

Importing this package registers the built-in rules for every
``CabinetStyle`` on the shared ``style_rules`` registry.
"""

from .registry import StyleRule, StyleRuleInput, StyleRuleRegistry, style_rules
from .styles import base_cabinet, drawer_base_cabinet, tall_cabinet, wall_cabinet

__all__ = [
    "StyleRule",
    "StyleRuleInput",
    "StyleRuleRegistry",
    "base_cabinet",
    "drawer_base_cabinet",
    "style_rules",
    "tall_cabinet",
    "wall_cabinet",
]
