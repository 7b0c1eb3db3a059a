"""
run_photo_grid.py — CLI Entry Point

This script serves as the command-line interface entry point for the
photo grid project. It forwards execution to the CLI logic defined in
`src/photo_grid/cli.py`.

Usage:
    python run_photo_grid.py --items photos.json --width 960 [options]
    python run_photo_grid.py --demo small --preview demo.png

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_photo_grid.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import photo_grid.cli as pg_cli

if __name__ == "__main__":
    sys.exit(pg_cli.main())
