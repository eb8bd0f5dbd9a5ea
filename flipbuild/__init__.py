"""
Image build tooling for the flipbook site.

Two commands:
    1. optimize: Write WebP/JPEG variants per preset plus an image manifest
    2. build-cloudflare: Package the site into ./dist for Cloudflare Pages

Variants are produced by either ImageMagick or Pillow.
"""

__version__ = "1.0.0"

from .presets import Preset, LOCAL_PRESETS, CLOUDFLARE_PRESETS
from .encoders import ImageEncoder, ImageMagickEncoder, PillowEncoder, get_encoder
from .manifest import ImageManifest
from .optimization_stats import OptimizationStats
from .optimizer import Optimizer
from .reporter import Reporter, SizeComparison, compute_size_comparison
from .html_patch import patch_slide_template, rewrite_index
from .headers import write_headers_file
from .build_config import BuildConfig
from .cloudflare import BuildResult, CloudflareBuilder

__all__ = [
    "Preset",
    "LOCAL_PRESETS",
    "CLOUDFLARE_PRESETS",
    "ImageEncoder",
    "ImageMagickEncoder",
    "PillowEncoder",
    "get_encoder",
    "ImageManifest",
    "OptimizationStats",
    "Optimizer",
    "Reporter",
    "SizeComparison",
    "compute_size_comparison",
    "patch_slide_template",
    "rewrite_index",
    "write_headers_file",
    "BuildConfig",
    "BuildResult",
    "CloudflareBuilder",
]
