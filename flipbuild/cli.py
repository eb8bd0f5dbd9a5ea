"""
Command Line Interface for the flipbook image build.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .build_config import BuildConfig
from .cloudflare import CloudflareBuilder
from .encoders import ENCODERS, ImageMagickEncoder, get_encoder
from .manifest import ImageManifest, MANIFEST_FILENAME
from .optimizer import Optimizer
from .reporter import Reporter, compute_size_comparison


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('sh').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('flipbuild')


def cmd_optimize(args: argparse.Namespace) -> int:
    """Execute optimize command."""
    logger = setup_logging(args.verbose)

    source_dir = Path(args.source_dir)
    if not source_dir.is_dir():
        logger.error(f"Source directory not found: {args.source_dir}")
        return 1

    encoder = get_encoder(args.engine, logger=logger)
    if not encoder.is_available():
        if isinstance(encoder, ImageMagickEncoder):
            logger.error("ImageMagick not found. Please install it:")
            for hint in ImageMagickEncoder.INSTALL_HINTS:
                logger.error(f"  {hint}")
        else:
            logger.error(f"{encoder.name} cannot encode WebP. Reinstall Pillow with WebP support.")
        return 1

    logger.info("Starting image optimization...")
    logger.info(f"Source: {source_dir}")
    logger.info(f"Output: {args.output_dir}")
    logger.info(f"Engine: {encoder.name}")

    try:
        optimizer = Optimizer(encoder, logger=logger)
        _, stats = optimizer.optimize_directory(source_dir, args.output_dir)

        print()
        print("Optimization complete!")
        print(f"Processed {stats.total_images} images")
        if stats.errors:
            print(f"Errors: {stats.errors}")
        print(f"Manifest saved to: {Path(args.output_dir) / MANIFEST_FILENAME}")

        comparison = compute_size_comparison(source_dir, args.output_dir, optimizer.presets)
        Reporter().report_size_comparison(comparison)

        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Optimization failed: {e}")
        return 1


def cmd_build_cloudflare(args: argparse.Namespace) -> int:
    """Execute build-cloudflare command."""
    logger = setup_logging(args.verbose)

    config = BuildConfig.from_env()
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    try:
        builder = CloudflareBuilder(
            source_dir=config.source_dir,
            build_dir=config.build_dir,
            logger=logger
        )
        result = builder.build()

        if result.fallback_copies:
            logger.warning(
                f"{len(result.fallback_copies)} images copied without optimization: "
                f"{', '.join(result.fallback_copies)}"
            )
        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Build failed: {e}")
        return 1


def cmd_report(args: argparse.Namespace) -> int:
    """Execute report command."""
    logger = setup_logging(args.verbose)

    try:
        manifest = ImageManifest.load(args.manifest)
    except FileNotFoundError:
        logger.error(f"Manifest not found: {args.manifest}")
        return 1
    except Exception as e:
        logger.error(f"Failed to load manifest: {e}")
        return 1

    Reporter().report_manifest(manifest)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='flipbuild',
        description='Image variants and Cloudflare Pages build for the flipbook site',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  optimize:          flipbuild optimize ./pages ./optimized-images
  build-cloudflare:  flipbuild build-cloudflare
  report:            flipbuild report -m optimized-images/image-manifest.json

build-cloudflare reads FLIPBOOK_SOURCE_DIR and FLIPBOOK_BUILD_DIR
(default ./flipbook-v2 and ./dist). The build directory is deleted first.
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Optimize command
    opt_parser = subparsers.add_parser('optimize', help='Generate WebP/JPEG variants for every preset')
    opt_parser.add_argument('source_dir', nargs='?', default='./pages',
                            help='Directory of source images (default: ./pages)')
    opt_parser.add_argument('output_dir', nargs='?', default='./optimized-images',
                            help='Output directory (default: ./optimized-images)')
    opt_parser.add_argument('-e', '--engine', choices=sorted(ENCODERS), default='imagemagick',
                            help='Image engine (default: imagemagick)')
    opt_parser.add_argument('-v', '--verbose', action='store_true',
                            default=argparse.SUPPRESS, help='Enable verbose logging')

    # Cloudflare build command
    cf_parser = subparsers.add_parser('build-cloudflare', help='Build ./dist for Cloudflare Pages')
    cf_parser.add_argument('-v', '--verbose', action='store_true',
                           default=argparse.SUPPRESS, help='Enable verbose logging')

    # Report command
    report_parser = subparsers.add_parser('report', help='Summarize an image manifest')
    report_parser.add_argument('-m', '--manifest', default='./optimized-images/image-manifest.json',
                               help='Manifest file')
    report_parser.add_argument('-v', '--verbose', action='store_true',
                               default=argparse.SUPPRESS, help='Enable verbose logging')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'optimize':
        return cmd_optimize(parsed_args)
    elif parsed_args.command == 'build-cloudflare':
        return cmd_build_cloudflare(parsed_args)
    elif parsed_args.command == 'report':
        return cmd_report(parsed_args)

    return 1
