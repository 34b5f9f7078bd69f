"""Command-line interface for Art Space."""
import argparse
import sys
import logging
from pathlib import Path

from .config import AppSettings, load_settings
from .preview import save_preview, PreviewError
from .resources import ResourceResolver, ResourceError
from .view_model import GalleryViewModel

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def run_snapshot(output_path: Path, steps: int = 0, settings: AppSettings = None) -> int:
    """
    Render the gallery screen to an image file without opening a window.

    Args:
        output_path: Destination image file
        steps: Navigation presses applied first (positive = next, negative = previous)
        settings: Application settings

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        settings = settings or load_settings()
        view_model = GalleryViewModel()
        direction = 1 if steps >= 0 else -1
        for _ in range(abs(steps)):
            view_model.navigate(direction)

        resolver = ResourceResolver(settings)
        save_preview(view_model, resolver, output_path, settings)
        return 0
    except (PreviewError, ResourceError) as e:
        logger.error(f"Snapshot failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error in snapshot mode: {e}", exc_info=True)
        return 1


def run_gui(settings: AppSettings = None) -> int:
    """
    Run Art Space in GUI mode.

    Args:
        settings: Application settings

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        # Imported here so snapshot mode works without a display
        from .ui.app import ArtSpaceApp

        settings = settings or load_settings()
        app = ArtSpaceApp(settings)
        app.run()

        return 0
    except Exception as e:
        logger.error(f"Error in GUI mode: {e}", exc_info=True)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Art Space - browse a small gallery of artworks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the gallery window
  python -m art_space.cli

  # Use your own artwork images (art_1.png, art_2.png, art_3.png)
  python -m art_space.cli --artwork-dir /path/to/images

  # Render the screen for the second artwork without a window
  python -m art_space.cli --snapshot screen.png --steps 1
        """
    )

    parser.add_argument(
        '--snapshot',
        type=str,
        default=None,
        help='Render the gallery screen to this image file instead of opening a window'
    )

    parser.add_argument(
        '--steps',
        type=int,
        default=0,
        help='Navigation presses before the snapshot (negative = previous)'
    )

    parser.add_argument(
        '--artwork-dir',
        type=str,
        default=None,
        help='Directory containing art_1.png, art_2.png and art_3.png'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def main(argv=None):
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.verbose)

    # Load settings
    settings = load_settings()

    if args.artwork_dir:
        artwork_dir = Path(args.artwork_dir).expanduser().resolve()
        if not artwork_dir.is_dir():
            logger.warning(f"Artwork directory does not exist: {artwork_dir}. Using placeholders.")
        settings.artwork_dir = str(artwork_dir)

    if args.steps and not args.snapshot:
        logger.warning("--steps only applies with --snapshot, ignoring")

    # Run appropriate mode
    if args.snapshot:
        return run_snapshot(Path(args.snapshot), args.steps, settings)
    else:
        return run_gui(settings)


if __name__ == '__main__':
    sys.exit(main())
