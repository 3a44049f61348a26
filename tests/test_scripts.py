"""
Tests for the standalone export script.
"""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent


@pytest.fixture
def layout(tmp_path):
    """Copy of the repository layout: octexport/ and scripts/ side by side."""
    shutil.copytree(
        ROOT / "octexport",
        tmp_path / "octexport",
        ignore=shutil.ignore_patterns("__pycache__"),
    )
    (tmp_path / "scripts").mkdir()
    shutil.copy(ROOT / "scripts" / "export_icons.py", tmp_path / "scripts")
    return tmp_path


def run_script(root):
    return subprocess.run(
        [sys.executable, str(root / "scripts" / "export_icons.py")],
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestExportScript:
    """Tests for scripts/export_icons.py."""

    def test_writes_static_files(self, layout):
        (layout / "static").mkdir()

        result = run_script(layout)

        assert result.returncode == 0, result.stderr
        assert (layout / "static" / "file.svg").read_text(encoding="utf-8").startswith(
            '<svg class="octicon octicon-file"'
        )
        assert (layout / "static" / "file_directory.svg").is_file()

    def test_missing_static_directory_fails(self, layout):
        result = run_script(layout)

        assert result.returncode != 0
        assert "Error" in result.stderr
        assert not (layout / "static").exists()

    def test_missing_icon_fails(self, layout):
        (layout / "static").mkdir()
        (layout / "octexport" / "data" / "octicons.json").write_text("{}", encoding="utf-8")

        result = run_script(layout)

        assert result.returncode != 0
        assert "IconNotFoundError" in result.stderr
        assert list((layout / "static").iterdir()) == []
