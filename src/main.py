# src/main.py — v1
"""CLI entry point.

Usage:
    ncexport graphml <input.json> [options]

The input file holds a codebook and a list of sessions (see api.models).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ncexport.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    _setup_logging(args.verbose)

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ncexport",
        description=f"ncexport v{__version__} - Network Canvas session exporter",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    p_graphml = subparsers.add_parser(
        "graphml", help="Export sessions to GraphML",
    )
    p_graphml.add_argument("input", type=Path, help="JSON file with codebook and sessions")
    p_graphml.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output directory (default: OUTPUT_DIR setting)",
    )
    p_graphml.add_argument(
        "--unify", action="store_true", default=None,
        help="Combine all sessions into one document",
    )
    p_graphml.add_argument(
        "--directed", action="store_true", default=None,
        help="Mark edges as directed",
    )
    p_graphml.add_argument(
        "--no-screen-coordinates", action="store_true",
        help="Keep layout coordinates normalized instead of projecting to pixels",
    )
    p_graphml.add_argument("--width", type=float, default=None, help="Screen width in pixels")
    p_graphml.add_argument("--height", type=float, default=None, help="Screen height in pixels")
    p_graphml.set_defaults(func=_cmd_graphml)

    return parser


def _option_overrides(args: argparse.Namespace) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if args.unify:
        overrides["unify_networks"] = True
    if args.directed:
        overrides["use_directed_edges"] = True
    if args.no_screen_coordinates:
        overrides["use_screen_layout_coordinates"] = False
    if args.width is not None:
        overrides["screen_layout_width"] = args.width
    if args.height is not None:
        overrides["screen_layout_height"] = args.height
    return overrides


async def _cmd_graphml(args: argparse.Namespace) -> int:
    """Export the input file's sessions to GraphML."""
    from ncexport.api.facade import export_graphml
    from ncexport.api.models import ExportInput
    from ncexport.config.settings import Settings

    input_path: Path = args.input
    if not input_path.exists():
        logger.error("File not found: %s", input_path)
        return 1

    export_input = ExportInput.model_validate_json(input_path.read_text(encoding="utf-8"))
    settings = Settings(output_dir=args.output) if args.output else Settings()
    options = settings.export_options(**_option_overrides(args))

    logger.info("Exporting %d sessions from %s", len(export_input.sessions), input_path.name)
    paths = await export_graphml(
        export_input.sessions, export_input.codebook, settings=settings, options=options
    )

    print("\nExport complete:")
    for path in paths:
        print(f"  {settings.output_dir / path}")
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from ncexport.config.settings import Settings
    from ncexport.logging.logger import setup_logging

    settings = Settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
