"""Factory for creating directory adapters."""

import importlib
import logging

from infrastructure.config.models import BotConfig, DirectoryBackend

from .base import DirectoryAdapter
from .memory import InMemoryDirectory
from .registry import get_directory_class

logger = logging.getLogger(__name__)


def _ensure_backend_imported(backend: DirectoryBackend) -> None:
    """
    Lazy-import the backend module to trigger `register_directory(...)`.

    Convention:
      - DirectoryBackend value MUST match module filename under infrastructure/directory/
        e.g., DirectoryBackend.DISCORD.value == "discord" -> infrastructure/directory/discord.py
    """
    module_name = f"{__package__}.{backend.value}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No directory module found for backend='{backend.value}'. "
                f"Expected file: infrastructure/directory/{backend.value}.py"
            ) from e
        raise


def make_directory(cfg: BotConfig, *, use_mock: bool = False) -> DirectoryAdapter:
    """
    Factory function to create the appropriate directory adapter.
    Args:
        cfg: Bot configuration containing backend settings
        use_mock: If True, use the in-memory directory regardless of cfg
    Returns:
        An instance of DirectoryAdapter for the configured backend.
    Raises:
        RuntimeError: If the backend is unsupported.
    """
    if use_mock:
        return InMemoryDirectory(cfg=cfg)

    adapter_cls = get_directory_class(cfg.backend)

    if adapter_cls is None:
        _ensure_backend_imported(cfg.backend)
        adapter_cls = get_directory_class(cfg.backend)

    if adapter_cls is None:
        raise RuntimeError(
            f"Backend '{cfg.backend.value}' did not register an adapter. "
            f"Make sure {cfg.backend.value}.py calls register_directory(...)."
        )

    logger.info("Using directory backend %s (%s)", cfg.backend.value, adapter_cls.__name__)
    return adapter_cls.from_cfg(cfg)  # type: ignore[attr-defined]
