"""
Tag input handling: alias resolution and parsing.

All functions in this module are pure (no I/O).
"""

from domain.tags.aliases import AliasTable, resolve_alias
from domain.tags.loader import parse_alias_config
from domain.tags.parser import capitalize_words, parse_tags

__all__ = [
    "AliasTable",
    "resolve_alias",
    "capitalize_words",
    "parse_tags",
    "parse_alias_config",
]
