"""Parse alias configuration from a YAML dict."""

from typing import Any

from domain.tags.aliases import BUILTIN_ABBREVIATIONS, AliasTable


def parse_alias_config(data: dict[str, Any]) -> AliasTable:
    """
    Build an AliasTable from the ``aliases`` block of the bot config.

    This is a pure function - YAML loading happens in infrastructure.config.loader.
    Configured abbreviations extend (and may override) the built-in ones.

    Raises:
        ValueError: If ``abbreviations`` is not a mapping
    """
    extra = data.get("abbreviations", {}) or {}
    if not isinstance(extra, dict):
        raise ValueError("aliases.abbreviations must be a mapping")

    abbreviations = dict(BUILTIN_ABBREVIATIONS)
    abbreviations.update({str(k).strip(): str(v).strip() for k, v in extra.items()})
    return AliasTable(abbreviations=abbreviations)
