"""Alias resolution: map a capitalized tag token to its canonical name."""

from pydantic import BaseModel, Field

from domain.schemas import TagName

GAME_AND_WATCH = "Game & Watch"

BUILTIN_ABBREVIATIONS: dict[str, TagName] = {
    "G&w": GAME_AND_WATCH,
    "G & W": GAME_AND_WATCH,
    "Dk": "Donkey Kong",
}


class AliasTable(BaseModel):
    """Alias rules for character tags.

    Substring rules are fixed and checked first; the abbreviation table is an
    exact-match lookup that configuration may extend.
    """

    abbreviations: dict[str, TagName] = Field(default_factory=lambda: dict(BUILTIN_ABBREVIATIONS))

    def resolve(self, token: str) -> TagName:
        """
        Return the canonical name for ``token``, or ``token`` itself.

        Matching is case-sensitive and expects the capitalization produced by
        the parser.

        Examples:
            >>> AliasTable().resolve("Mr Game And Watch")
            'Game & Watch'
            >>> AliasTable().resolve("Dk")
            'Donkey Kong'
            >>> AliasTable().resolve("Mario")
            'Mario'
        """
        if "Game" in token or "Watch" in token:
            return GAME_AND_WATCH

        # Kept as deployed: Banjo & Kazooie tags collapse into Game & Watch.
        if "Banjo" in token or "Kazooie" in token:
            return GAME_AND_WATCH

        if "Rosalina" in token:
            return "Rosalina & Luma"

        if ("Pyra" in token and "Mythra" in token) or "Aegis" in token:
            return "Aegis"

        return self.abbreviations.get(token, token)


DEFAULT_ALIASES = AliasTable()


def resolve_alias(token: str, aliases: AliasTable | None = None) -> TagName:
    return (aliases or DEFAULT_ALIASES).resolve(token)
