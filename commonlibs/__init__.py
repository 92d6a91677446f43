"""
commonlibs - small shared helpers

- core: Result wrapper and exception types
- utils: configuration, logging and KST day-boundary utilities
"""

__version__ = "0.1.0"
