"""
This test dynamically loads the run_photo_grid.py script using importlib.
"""
import importlib
import json
import subprocess
import sys
from pathlib import Path
from unittest import mock

import pytest

# run_photo_grid.py is a top-level script, not part of the src/ package,
# so it is loaded through importlib rather than a regular import.


@pytest.mark.integration
def test_script_main_entry(tmp_path: Path) -> None:
    """Integration test: execute script via subprocess on a demo run."""
    script = Path(__file__).resolve().parents[1] / "run_photo_grid.py"
    out = tmp_path / "layout.json"

    result = subprocess.run(
        [
            sys.executable,
            str(script),
            "--demo", "small",
            "--seed", "1",
            "--width", "800",
            "--out", str(out),
        ],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=120,
        check=False,
    )

    assert result.returncode == 0, (
        f"Script failed:\nSTDOUT: {result.stdout}\nSTDERR: {result.stderr}"
    )
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 30  # noqa: PLR2004
    assert "Layout written to" in result.stderr


def test_run_photo_grid_not_main() -> None:
    """Ensure run_photo_grid.py does nothing when not executed as __main__."""
    if "run_photo_grid" in sys.modules:
        del sys.modules["run_photo_grid"]

    with mock.patch("photo_grid.cli.main") as mock_main:
        with mock.patch.object(sys, "path", sys.path.copy()):
            module = importlib.import_module("run_photo_grid")
            mock_main.assert_not_called()
            assert module.__name__ != "__main__"
