import pytest

from domain.categories import Category, is_tag_role, policy, role_name_for
from domain.errors import UnknownCategory


def test_policies() -> None:
    assert policy(Category.PRIMARY).suffix == " main"
    assert policy(Category.PRIMARY).color == 15844367
    assert policy(Category.SECONDARY).suffix == " secondary"
    assert policy(Category.SECONDARY).color == 12745742


def test_from_command_name() -> None:
    assert Category.from_command_name("main") is Category.PRIMARY
    assert Category.from_command_name("secondary") is Category.SECONDARY


@pytest.mark.parametrize("name", ["Main", "mains", "", "tertiary"])
def test_unknown_command_name(name: str) -> None:
    with pytest.raises(UnknownCategory):
        Category.from_command_name(name)


def test_role_name_and_predicate() -> None:
    name = role_name_for("Mario", Category.PRIMARY)
    assert name == "Mario main"
    assert is_tag_role(name, Category.PRIMARY)
    assert not is_tag_role(name, Category.SECONDARY)
    assert is_tag_role("Mario secondary", Category.SECONDARY)
    assert not is_tag_role("Moderator", Category.PRIMARY)
