"""
Directory service adapters.

Implements the adapter pattern for the system of record for guild roles and
membership:
- Discord (REST API over httpx), imported on first use by make_directory
- In-memory (for tests and dry runs)

All adapters implement the DirectoryAdapter interface.
"""

from infrastructure.directory.base import DirectoryAdapter
from infrastructure.directory.factory import make_directory
from infrastructure.directory.memory import InMemoryDirectory

__all__ = [
    # Abstract base
    "DirectoryAdapter",
    # Concrete implementations
    "InMemoryDirectory",
    # Factory (most commonly used)
    "make_directory",
]
