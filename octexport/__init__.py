"""
Octexport - Export Octicons to static SVG assets

Octexport renders named icons from an Octicons registry to SVG markup and
writes them to fixed locations in the static asset directory.
"""

from .errors import OctexportError, IconNotFoundError, RegistryError
from .registry import Octicon, OcticonRegistry
from .exporter import (
    ExportTask,
    ExportResult,
    DEFAULT_TASKS,
    export_icons,
    find_stale,
    render_icon,
    is_valid_svg,
)

__version__ = "0.1.0"
__author__ = "Octexport Contributors"

__all__ = [
    # Errors
    'OctexportError',
    'IconNotFoundError',
    'RegistryError',
    # Registry
    'Octicon',
    'OcticonRegistry',
    # Export
    'ExportTask',
    'ExportResult',
    'DEFAULT_TASKS',
    'export_icons',
    'find_stale',
    'render_icon',
    'is_valid_svg',
]
