import pytest

from application.sync import assign_tag_roles, clear_tag_roles, synchronize_tags
from domain.categories import Category
from domain.errors import CorruptState, TransportError
from domain.schemas import TagSet
from domain.tags.parser import parse_tags
from infrastructure.directory.memory import InMemoryDirectory

GUILD = "100"
GOLD = 15844367
DARK_GOLD = 12745742


async def _sync(directory: InMemoryDirectory, user_id: str, raw: str, category: Category = Category.PRIMARY):
    member = await directory.get_member(GUILD, user_id)
    assert member is not None
    report = await synchronize_tags(directory, GUILD, member, parse_tags(raw), category)
    return member, report


@pytest.mark.asyncio
async def test_end_to_end_creates_roles_with_category_color(directory: InMemoryDirectory) -> None:
    directory.seed_member(GUILD, "a")

    member, report = await _sync(directory, "a", "rosalina,  Pyra Mythra, dk")

    assert report.created == ["Rosalina & Luma main", "Aegis main", "Donkey Kong main"]
    assert directory.member_role_names(GUILD, "a") == ["Aegis main", "Donkey Kong main", "Rosalina & Luma main"]
    roles = await directory.list_roles(GUILD)
    assert {r.color for r in roles} == {GOLD}
    assert len(member.roles) == 3


@pytest.mark.asyncio
async def test_existing_role_is_reused(directory: InMemoryDirectory) -> None:
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    directory.seed_member(GUILD, "b", roles=[mario.id])
    directory.seed_member(GUILD, "a")

    _, report = await _sync(directory, "a", "mario")

    assert report.created == []
    assert directory.role_names(GUILD) == ["Mario main"]
    assert directory.member_role_names(GUILD, "a") == ["Mario main"]


@pytest.mark.asyncio
async def test_repeated_sync_keeps_a_single_role(directory: InMemoryDirectory) -> None:
    directory.seed_member(GUILD, "a")

    await _sync(directory, "a", "mario")
    await _sync(directory, "a", "mario")

    assert directory.role_names(GUILD) == ["Mario main"]
    assert directory.member_role_names(GUILD, "a") == ["Mario main"]


@pytest.mark.asyncio
async def test_steady_state_resync_removes_then_readds(directory: InMemoryDirectory) -> None:
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    directory.seed_member(GUILD, "a", roles=[mario.id])
    directory.seed_member(GUILD, "b", roles=[mario.id])

    await _sync(directory, "a", "mario")

    assert directory.mutations() == [
        ("remove_member_role", GUILD, "a", mario.id),
        ("add_member_role", GUILD, "a", mario.id),
    ]


@pytest.mark.asyncio
async def test_sole_holder_clearing_deletes_role(directory: InMemoryDirectory) -> None:
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    directory.seed_member(GUILD, "a", roles=[mario.id])

    _, report = await _sync(directory, "a", "")

    assert report.deleted == ["Mario main"]
    assert directory.role_names(GUILD) == []
    assert directory.member_role_names(GUILD, "a") == []


@pytest.mark.asyncio
async def test_shared_role_survives_clearing(directory: InMemoryDirectory) -> None:
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    directory.seed_member(GUILD, "a", roles=[mario.id])
    directory.seed_member(GUILD, "b", roles=[mario.id])

    _, report = await _sync(directory, "a", "")

    assert report.removed == ["Mario main"]
    assert report.deleted == []
    assert directory.role_names(GUILD) == ["Mario main"]
    assert directory.member_role_names(GUILD, "a") == []
    assert directory.member_role_names(GUILD, "b") == ["Mario main"]


@pytest.mark.asyncio
async def test_clearing_leaves_other_categories_and_plain_roles(directory: InMemoryDirectory) -> None:
    main = directory.seed_role(GUILD, "Mario main", GOLD)
    secondary = directory.seed_role(GUILD, "Luigi secondary", DARK_GOLD)
    mod = directory.seed_role(GUILD, "Moderator")
    member = directory.seed_member(GUILD, "a", roles=[main.id, secondary.id, mod.id])

    report = await clear_tag_roles(directory, GUILD, member, Category.SECONDARY)

    assert report.removed == ["Luigi secondary"]
    assert directory.member_role_names(GUILD, "a") == ["Mario main", "Moderator"]
    assert member.roles == [main.id, mod.id]


@pytest.mark.asyncio
async def test_sync_replaces_previous_set(directory: InMemoryDirectory) -> None:
    directory.seed_member(GUILD, "a")
    await _sync(directory, "a", "mario, luigi")

    await _sync(directory, "a", "luigi, peach")

    assert directory.member_role_names(GUILD, "a") == ["Luigi main", "Peach main"]
    assert directory.role_names(GUILD) == ["Luigi main", "Peach main"]


@pytest.mark.asyncio
async def test_corrupt_state_aborts_before_any_mutation(directory: InMemoryDirectory) -> None:
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    directory.seed_member(GUILD, "a", roles=[mario.id, "999"])
    member = await directory.get_member(GUILD, "a")

    with pytest.raises(CorruptState) as exc:
        await synchronize_tags(directory, GUILD, member, parse_tags("luigi"), Category.PRIMARY)

    assert exc.value.role_id == "999"
    assert directory.mutations() == []
    assert directory.role_names(GUILD) == ["Mario main"]


@pytest.mark.asyncio
async def test_create_failure_aborts_remaining_tags(directory: InMemoryDirectory) -> None:
    directory.fail_after = {"create_role": 1}
    directory.seed_member(GUILD, "a")
    member = await directory.get_member(GUILD, "a")

    with pytest.raises(TransportError) as exc:
        await synchronize_tags(directory, GUILD, member, parse_tags("mario, luigi, peach"), Category.PRIMARY)

    assert exc.value.operation == "create_role"
    # first tag is applied and not rolled back
    assert directory.member_role_names(GUILD, "a") == ["Mario main"]
    assert directory.role_names(GUILD) == ["Mario main"]


@pytest.mark.asyncio
async def test_remove_failure_aborts_clearing(directory: InMemoryDirectory) -> None:
    directory.fail_after = {"remove_member_role": 0}
    mario = directory.seed_role(GUILD, "Mario main", GOLD)
    member = directory.seed_member(GUILD, "a", roles=[mario.id])

    with pytest.raises(TransportError):
        await synchronize_tags(directory, GUILD, member, parse_tags("luigi"), Category.PRIMARY)

    assert not any(c[0] == "create_role" for c in directory.calls)
    assert directory.member_role_names(GUILD, "a") == ["Mario main"]


@pytest.mark.asyncio
async def test_assign_refetches_roles_and_empty_set_is_noop(directory: InMemoryDirectory) -> None:
    member = directory.seed_member(GUILD, "a")

    report = await assign_tag_roles(directory, GUILD, member, TagSet(), Category.PRIMARY)

    assert report.assigned == []
    assert directory.calls == [("list_roles", GUILD)]


@pytest.mark.asyncio
async def test_assign_never_creates_the_same_name_twice(directory: InMemoryDirectory) -> None:
    member = directory.seed_member(GUILD, "a")
    tags = TagSet(names=("Mario", "Mario"))

    await assign_tag_roles(directory, GUILD, member, tags, Category.PRIMARY)

    assert directory.role_names(GUILD) == ["Mario main"]
    assert [c[0] for c in directory.mutations()].count("create_role") == 1


@pytest.mark.asyncio
async def test_secondary_category_uses_its_suffix_and_color(directory: InMemoryDirectory) -> None:
    directory.seed_member(GUILD, "a")

    await _sync(directory, "a", "ness", Category.SECONDARY)

    roles = await directory.list_roles(GUILD)
    assert [(r.name, r.color) for r in roles] == [("Ness secondary", DARK_GOLD)]
