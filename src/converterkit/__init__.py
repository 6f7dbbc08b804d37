"""
Converter Kit: turn a single file into a base64 text archive and back.
"""

__version__ = "1.3.5"

__all__ = [
    "archive",
    "base_storage",
    "config",
    "encoder",
    "errors",
    "local_storage",
    "main",
    "resolver",
    "utils",
]
