"""
Exceptions raised by octexport.

Filesystem failures while writing are left as plain ``OSError``.
"""


class OctexportError(Exception):
    """Base class for octexport errors."""


class IconNotFoundError(OctexportError, KeyError):
    """Raised when an icon name is not present in the registry."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Icon not found in registry: {self.name!r}"


class RegistryError(OctexportError):
    """Raised when icon data cannot be loaded."""
