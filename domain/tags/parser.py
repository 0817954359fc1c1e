"""Parse comma-separated character input into a TagSet."""

from domain.schemas import TagName, TagSet
from domain.tags.aliases import AliasTable, resolve_alias


def capitalize_words(text: str) -> str:
    """
    Upper-case the first letter after each space and lower-case every other letter.

    Only the space character is a word boundary, and only ASCII letters change
    case, so "g&w" becomes "G&w" and "mr. game" becomes "Mr. Game".
    """
    out: list[str] = []
    previous = " "
    for c in text:
        if c.isascii():
            c = c.upper() if previous == " " else c.lower()
        out.append(c)
        previous = c
    return "".join(out)


def parse_tags(raw: str, aliases: AliasTable | None = None) -> TagSet:
    """
    Turn raw command text into canonical tags.

    Steps: split on commas, trim, drop pieces of at most one UTF-8 byte, capitalize,
    resolve aliases, then collapse duplicates keeping first-seen order.

    Args:
        raw: Text as typed by the member (may be empty)
        aliases: Alias table to use (defaults to the built-in one)

    Returns:
        TagSet in order of first appearance
    """
    names: list[TagName] = []
    for piece in raw.split(","):
        piece = piece.strip()
        if len(piece.encode("utf-8")) <= 1:
            continue
        names.append(resolve_alias(capitalize_words(piece), aliases))
    return TagSet.from_names(names)
