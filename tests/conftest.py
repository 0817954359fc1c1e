import pytest

from application.context import SyncContext
from infrastructure.config.models import BotConfig, DirectoryBackend
from infrastructure.directory.memory import InMemoryDirectory

GUILD = "100"


@pytest.fixture
def cfg() -> BotConfig:
    return BotConfig(backend=DirectoryBackend.MEMORY, guild_id=GUILD)


@pytest.fixture
def directory(cfg: BotConfig) -> InMemoryDirectory:
    return InMemoryDirectory(cfg=cfg)


@pytest.fixture
def ctx(cfg: BotConfig, directory: InMemoryDirectory) -> SyncContext:
    return SyncContext(cfg=cfg, directory=directory)
