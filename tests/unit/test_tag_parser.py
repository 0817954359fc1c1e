from domain.tags.aliases import AliasTable
from domain.tags.parser import capitalize_words, parse_tags


def test_capitalize_words() -> None:
    assert capitalize_words("MARIO") == "Mario"
    assert capitalize_words("mario luigi") == "Mario Luigi"
    assert capitalize_words("g&w") == "G&w"
    assert capitalize_words("mr. game & watch") == "Mr. Game & Watch"
    assert capitalize_words("king k. rool") == "King K. Rool"


def test_hyphen_is_not_a_word_boundary() -> None:
    assert capitalize_words("pac-man") == "Pac-man"


def test_parse_capitalizes() -> None:
    assert parse_tags("MARIO").names == ("Mario",)
    assert parse_tags("mario luigi").names == ("Mario Luigi",)


def test_parse_keeps_first_seen_order_and_collapses_duplicates() -> None:
    assert parse_tags("Mario, Luigi, mario").names == ("Mario", "Luigi")


def test_duplicates_after_alias_resolution_collapse() -> None:
    assert parse_tags("dk, donkey kong, DK").names == ("Donkey Kong",)


def test_parse_trims_and_drops_short_pieces() -> None:
    assert parse_tags("  ness ,a, ,,  lucas  ").names == ("Ness", "Lucas")


def test_parse_g_and_w() -> None:
    assert parse_tags("g&w").names == ("Game & Watch",)


def test_empty_input_yields_empty_tagset() -> None:
    tags = parse_tags("")
    assert tags.names == ()
    assert len(tags) == 0


def test_end_to_end_example() -> None:
    assert parse_tags("rosalina,  Pyra Mythra, dk").names == ("Rosalina & Luma", "Aegis", "Donkey Kong")


def test_parse_uses_given_alias_table() -> None:
    table = AliasTable(abbreviations={"Zss": "Zero Suit Samus"})
    assert parse_tags("zss, dk", table).names == ("Zero Suit Samus", "Dk")


def test_length_filter_counts_encoded_bytes() -> None:
    assert parse_tags("é").names == ("é",)
    assert parse_tags("a, é, ness").names == ("é", "Ness")
