"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Directory service (Discord REST, in-memory)
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import BotConfig, DirectoryBackend, load_bot_config
from infrastructure.directory import DirectoryAdapter, make_directory

__all__ = [
    # Directory adapters (most commonly used)
    "make_directory",
    "DirectoryAdapter",
    # Configuration (most commonly used)
    "load_bot_config",
    "BotConfig",
    "DirectoryBackend",
]
