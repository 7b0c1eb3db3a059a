"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import photo_grid.config as pg_config
from photo_grid.demo import run_demo
from photo_grid.items_io import dump_results, load_item_specs, write_results
from photo_grid.layout import LayoutEngine
from photo_grid.logging_utils import logger, set_verbosity
from photo_grid.preview import save_preview
from photo_grid.runtime import (
    non_negative_int,
    parse_hex_color,
    positive_int,
    resolve_project_version,
    validate_layout_request,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from photo_grid.type_defs import ItemResult

T = TypeVar("T")

DEMO_CHOICES = ("small", "large")


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description=(
            "Compute a justified photo grid: rows of images that exactly "
            "fill the container width while keeping each aspect ratio."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  photo-grid --items photos.json --width 960 --padding 4\n"
            "  photo-grid --demo small --seed 7 --preview demo.png\n"
        ),
    )

    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "--items", type=Path,
        help="JSON or TOML file listing images with natural sizes")
    source.add_argument(
        "--demo", choices=DEMO_CHOICES, default=None,
        help="Lay out random placeholder images of the given size")

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--width", type=_wrap_validator(positive_int), default=None,
        help="Container width in pixels")
    grid.add_argument(
        "--padding", type=_wrap_validator(non_negative_int), default=None,
        help="Padding between items in pixels")

    reflow = p.add_argument_group("reflow")
    reflow.add_argument(
        "--quiet-interval", type=_wrap_validator(non_negative_int),
        default=None,
        help="Debounce interval in milliseconds for the demo page load")
    reflow.add_argument(
        "--seed", type=_wrap_validator(non_negative_int), default=None,
        help="Random seed for the demo")

    output = p.add_argument_group("output")
    output.add_argument(
        "--out", type=Path, default=None,
        help="Write the layout as JSON to this file (default: stdout)")
    output.add_argument(
        "--preview", type=Path, default=None,
        help="Save a PNG preview of the layout")
    output.add_argument(
        "--background", type=str, default=None,
        help="Preview background color as #rrggbb")
    output.add_argument(
        "--no-labels", action="store_true",
        help="Do not draw item ids on the preview")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without computing a layout")

    p.add_argument(
        "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")
    return p


def log_parameters(
    cfg: pg_config.PhotoGridConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective layout parameters."""
    if args.config:
        logger.info("Loaded config from: %s", args.config)
    if args.demo is not None:
        logger.info("Demo size: %s", cfg.demo.size)
        logger.info("Random Seed: %s", cfg.demo.seed)
        logger.info("Quiet Interval (ms): %d", cfg.reflow.quiet_interval_ms)
    else:
        logger.info("Items file: %s", args.items)
    logger.info("Container Width: %d", cfg.grid.container_width)
    logger.info("Padding: %d", cfg.grid.padding)


def compute_layout(
    args: argparse.Namespace,
    cfg: pg_config.PhotoGridConfig,
) -> list[ItemResult]:
    """Produce results for either an items file or the demo."""
    if args.demo is not None:
        return run_demo(cfg).results

    specs = load_item_specs(args.items)
    width = cfg.grid.container_width
    padding = cfg.grid.padding
    validate_layout_request(width, padding, specs)
    return LayoutEngine().arrange(width, padding, specs)


def emit_outputs(
    args: argparse.Namespace,
    cfg: pg_config.PhotoGridConfig,
    results: Sequence[ItemResult],
) -> None:
    """Write JSON results and the optional preview."""
    padding = cfg.grid.padding
    if args.out is not None:
        write_results(args.out, results, padding)
    else:
        print(dump_results(results, padding))  # noqa: T201

    if args.preview is not None:
        save_preview(
            args.preview,
            results,
            cfg.grid.container_width,
            padding,
            background=parse_hex_color(cfg.preview.background),
            show_labels=cfg.preview.show_labels,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and compute the layout."""
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(verbose=args.verbose)

    base_cfg: pg_config.PhotoGridConfig | None = None
    try:
        if args.config:
            base_cfg = pg_config.ConfigLoader.load(args.config)
            if args.validate_config_only:
                logger.info("Config %s validated successfully.", args.config)
                return 0
        elif args.validate_config_only:
            parser.error("--validate-config-only requires --config")

        if args.items is None and args.demo is None:
            parser.error("one of the arguments --items --demo is required")

        cfg = pg_config.build_config_from_cli(vars(args), base_config=base_cfg)
        log_parameters(cfg, args)
        results = compute_layout(args, cfg)
        emit_outputs(args, cfg, results)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    return 0


__all__ = ["build_parser", "main"]
