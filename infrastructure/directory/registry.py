import logging

from infrastructure.config.models import DirectoryBackend

from .base import DirectoryAdapter

logger = logging.getLogger(__name__)

# Backend -> Adapter class
_DIRECTORY_REGISTRY: dict[DirectoryBackend, type[DirectoryAdapter]] = {}


def register_directory(
    backend: DirectoryBackend, adapter_cls: type[DirectoryAdapter], *, override: bool = False
) -> None:
    """Register an adapter class for a backend.

    This is the plugin hook: backend modules call this at import time.
    """
    if (backend in _DIRECTORY_REGISTRY) and not override:
        existing = _DIRECTORY_REGISTRY[backend]
        raise RuntimeError(
            f"Adapter already registered for backend={backend.value}: {existing.__name__}. "
            f"Use override=True to replace."
        )
    _DIRECTORY_REGISTRY[backend] = adapter_cls
    logger.debug("Registered directory adapter for backend=%s: %s", backend.value, adapter_cls.__name__)


def get_directory_class(backend: DirectoryBackend) -> type[DirectoryAdapter] | None:
    """Return the registered adapter class (or None if not registered yet)."""
    return _DIRECTORY_REGISTRY.get(backend)
