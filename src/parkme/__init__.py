"""Park.me project setup - scaffolds a new Park.me workspace.

Logging is disabled when the package is used as a library.
Library users can enable it by calling parkme.enable_logging().
"""

from parkme.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
