"""
Octexport Icon Registry - name to icon lookup backed by Octicons data.

The data file follows the Primer Octicons ``build/data.json`` layout::

    {"<name>": {"name": ..., "keywords": [...],
                "heights": {"16": {"width": 16, "path": "<path .../>"}}}}

A small subset ships with the package; a full ``data.json`` from the
octicons distribution can be loaded with :meth:`OcticonRegistry.from_file`.
"""

import json
from collections.abc import Mapping
from html import escape
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import IconNotFoundError, RegistryError

BUNDLED_DATA = Path(__file__).parent / "data" / "octicons.json"

DEFAULT_HEIGHT = 16


def _attributes_to_string(attributes: Dict[str, str]) -> str:
    return " ".join(f'{key}="{escape(value, quote=True)}"' for key, value in attributes.items())


class Octicon:
    """A single icon drawn at one or more natural heights."""

    def __init__(self, name: str, heights: Dict[int, Tuple[int, str]], keywords: Optional[List[str]] = None):
        if not heights:
            raise RegistryError(f"Icon {name!r} has no heights")
        self.name = name
        self.keywords = tuple(keywords or ())
        # height -> (width, inner svg markup)
        self._heights = dict(sorted(heights.items()))

    @property
    def natural_heights(self) -> List[int]:
        return list(self._heights)

    def __repr__(self):
        return f"Octicon({self.name!r}, heights={self.natural_heights})"

    def closest_natural_height(self, height: int) -> int:
        """Largest natural height not above ``height``, else the smallest one."""
        closest = self.natural_heights[0]
        for natural in self.natural_heights:
            if natural <= height:
                closest = natural
        return closest

    def to_svg(
        self,
        height: Optional[int] = None,
        width: Optional[int] = None,
        aria_label: Optional[str] = None,
        css_class: Optional[str] = None,
    ) -> str:
        """
        Render the icon as SVG markup.

        Called without arguments this produces the default octicons output:
        the smallest natural height, ``aria-hidden`` and no extra classes.

        Args:
            height: Requested height in pixels
            width: Requested width in pixels (height follows proportionally)
            aria_label: Accessible label; makes the SVG a labelled image
            css_class: Extra CSS classes appended to the octicon classes

        Returns:
            SVG text
        """
        natural_height = self.closest_natural_height(height or width or DEFAULT_HEIGHT)
        natural_width, path = self._heights[natural_height]

        if height is None:
            height = int(width * natural_height / natural_width) if width else natural_height
        if width is None:
            width = int(height * natural_width / natural_height)

        classes = f"octicon octicon-{self.name}"
        if css_class:
            classes = f"{classes} {css_class}"

        attributes = {
            "class": classes,
            "viewBox": f"0 0 {natural_width} {natural_height}",
            "version": "1.1",
            "width": str(width),
            "height": str(height),
        }
        if aria_label:
            attributes["role"] = "img"
            attributes["aria-label"] = aria_label
        else:
            attributes["aria-hidden"] = "true"

        return f"<svg {_attributes_to_string(attributes)}>{path}</svg>"


class OcticonRegistry(Mapping):
    """Read-only mapping of icon names to :class:`Octicon` definitions."""

    def __init__(self, icons: Dict[str, Octicon], source: Optional[Path] = None):
        self._icons = dict(icons)
        self.source = source

    @classmethod
    def from_data(cls, data: dict, source: Optional[Path] = None) -> "OcticonRegistry":
        """Build a registry from parsed ``data.json`` content."""
        if not isinstance(data, dict):
            raise RegistryError("Icon data must be a JSON object keyed by icon name")

        icons = {}
        for key, entry in data.items():
            try:
                name = entry.get("name", key)
                heights = {
                    int(height): (int(info["width"]), info["path"])
                    for height, info in entry["heights"].items()
                }
                keywords = list(entry.get("keywords", []))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise RegistryError(f"Malformed entry for icon {key!r}: {e}") from e
            icons[key] = Octicon(name, heights, keywords)

        return cls(icons, source=source)

    @classmethod
    def from_file(cls, path) -> "OcticonRegistry":
        """Load a registry from an octicons ``data.json`` file."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise RegistryError(f"Could not read icon data {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RegistryError(f"Invalid JSON in icon data {path}: {e}") from e
        return cls.from_data(data, source=path)

    @classmethod
    def bundled(cls) -> "OcticonRegistry":
        """Registry backed by the icon data shipped with the package."""
        return cls.from_file(BUNDLED_DATA)

    def lookup(self, name: str) -> Octicon:
        return self[name]

    def __getitem__(self, name: str) -> Octicon:
        try:
            return self._icons[name]
        except KeyError:
            raise IconNotFoundError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._icons)

    def __len__(self) -> int:
        return len(self._icons)
