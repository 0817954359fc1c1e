"""Tag categories and the per-category policy that parameterizes the engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.errors import UnknownCategory
from domain.schemas import TagName


class Category(str, Enum):
    """Supported tag categories. The value doubles as the command name."""

    PRIMARY = "main"
    SECONDARY = "secondary"

    @classmethod
    def from_command_name(cls, name: str) -> "Category":
        try:
            return cls(name)
        except ValueError as e:
            raise UnknownCategory(name) from e


class CategoryPolicy(BaseModel):
    """Naming suffix, role color and command description for one category."""

    model_config = ConfigDict(frozen=True)

    suffix: str
    color: int
    description: str


# https://gist.github.com/thomasbnt/b6f455e2c7d743b796917fa3c205f812
CATEGORY_POLICIES: dict[Category, CategoryPolicy] = {
    Category.PRIMARY: CategoryPolicy(suffix=" main", color=15844367, description="Set your mains"),  # GOLD
    Category.SECONDARY: CategoryPolicy(
        suffix=" secondary", color=12745742, description="Set your secondaries"
    ),  # DARK_GOLD
}


def policy(category: Category) -> CategoryPolicy:
    return CATEGORY_POLICIES[category]


def is_tag_role(role_name: str, category: Category) -> bool:
    """A role belongs to ``category`` iff its name ends with the category suffix."""
    return role_name.endswith(policy(category).suffix)


def role_name_for(tag: TagName, category: Category) -> str:
    return f"{tag}{policy(category).suffix}"
