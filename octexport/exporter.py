"""
Octexport Exporter - render registry icons to SVG files.

Every task is looked up and rendered before the first file is written, so a
missing icon leaves all destinations untouched. Write failures propagate as
``OSError``.
"""

import hashlib
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence

from .errors import IconNotFoundError

# Outputs land in <repo root>/static, next to the package directory.
DEFAULT_BASE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class ExportTask:
    """An icon name paired with its destination, relative to the base dir."""
    icon: str
    path: Path


DEFAULT_TASKS = (
    ExportTask("file", Path("../static/file.svg")),
    ExportTask("file-directory-fill", Path("../static/file_directory.svg")),
)


@dataclass(frozen=True)
class ExportResult:
    task: ExportTask
    output: Path
    size: int
    sha256: str


def render_icon(registry: Mapping, name: str) -> str:
    """Look up ``name`` and render it with default options."""
    try:
        icon = registry[name]
    except IconNotFoundError:
        raise
    except KeyError:
        raise IconNotFoundError(name) from None
    return icon.to_svg()


def is_valid_svg(text: str) -> bool:
    """Check that ``text`` parses as XML with an ``<svg>`` root."""
    if not text or not text.strip():
        return False
    try:
        root = ET.fromstring(text)
    except ET.ParseError:
        return False
    return root.tag.split('}')[-1] == 'svg'


def resolve_output(task: ExportTask, base_dir: Path) -> Path:
    return (Path(base_dir) / task.path).resolve()


def check_distinct(tasks: Iterable[ExportTask], base_dir: Path) -> None:
    seen = {}
    for task in tasks:
        output = resolve_output(task, base_dir)
        if output in seen:
            raise ValueError(
                f"Icons {seen[output]!r} and {task.icon!r} both export to {output}"
            )
        seen[output] = task.icon


def render_tasks(registry: Mapping, tasks: Sequence[ExportTask]) -> List[str]:
    """Render every task in order; fails on the first unknown icon."""
    return [render_icon(registry, task.icon) for task in tasks]


def export_icons(
    registry: Mapping,
    tasks: Sequence[ExportTask] = DEFAULT_TASKS,
    base_dir: Path = DEFAULT_BASE_DIR,
) -> List[ExportResult]:
    """
    Export icons from ``registry`` to SVG files.

    Destination directories are not created; a missing or read-only
    directory raises ``OSError``. Existing files are overwritten.

    Args:
        registry: Mapping of icon name to an object with ``to_svg()``
        tasks: Export tasks to run, in order
        base_dir: Directory task paths are relative to

    Returns:
        One ExportResult per task
    """
    check_distinct(tasks, base_dir)
    rendered = render_tasks(registry, tasks)

    results = []
    for task, svg in zip(tasks, rendered):
        output = resolve_output(task, base_dir)
        data = svg.encode('utf-8')
        output.write_bytes(data)
        results.append(ExportResult(
            task=task,
            output=output,
            size=len(data),
            sha256=hashlib.sha256(data).hexdigest(),
        ))
    return results


def find_stale(
    registry: Mapping,
    tasks: Sequence[ExportTask] = DEFAULT_TASKS,
    base_dir: Path = DEFAULT_BASE_DIR,
) -> List[ExportTask]:
    """Tasks whose file is missing or differs from a fresh rendering."""
    check_distinct(tasks, base_dir)
    stale = []
    for task, svg in zip(tasks, render_tasks(registry, tasks)):
        output = resolve_output(task, base_dir)
        if not output.is_file() or output.read_bytes() != svg.encode('utf-8'):
            stale.append(task)
    return stale
