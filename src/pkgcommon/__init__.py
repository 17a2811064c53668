"""
Common helpers for the package state registry.

Modules:
- fsutil: path joining, existence checks and recursive directory creation
- plist: property-list document codec (plain or gzip-compressed files)
"""

__all__ = [
    "fsutil",
    "plist",
]
