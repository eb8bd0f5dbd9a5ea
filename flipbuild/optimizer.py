"""
Optimizer - Generates per-preset image variants for a directory of images.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .encoders import ImageEncoder
from .manifest import ImageManifest, MANIFEST_FILENAME
from .optimization_stats import OptimizationStats
from .presets import LOCAL_PRESETS, Preset, list_source_images


class Optimizer:
    """
    Writes a WebP and a JPEG variant of every source image for every preset.

    Outputs land in `<output_dir>/<preset name>/` and the paths are recorded
    in `<output_dir>/image-manifest.json`.
    """

    def __init__(
        self,
        encoder: ImageEncoder,
        presets: Sequence[Preset] = LOCAL_PRESETS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize optimizer.

        Args:
            encoder: Strategy used to resize and encode
            presets: Presets to generate, in processing order
            logger: Optional logger instance
        """
        self.encoder = encoder
        self.presets = tuple(presets)
        self.logger = logger or logging.getLogger(__name__)

    def prepare_output_dirs(self, output_dir: Path) -> None:
        """Create one subdirectory per preset."""
        for preset in self.presets:
            (output_dir / preset.name).mkdir(parents=True, exist_ok=True)

    def optimize_directory(
        self,
        source_dir: Union[str, Path],
        output_dir: Union[str, Path]
    ) -> Tuple[ImageManifest, OptimizationStats]:
        """
        Optimize every image in source_dir.

        A failed (image, preset) pair is logged and left out of the manifest;
        the remaining pairs are still processed.

        Args:
            source_dir: Directory holding .jpg/.jpeg/.png originals
            output_dir: Root directory for preset subdirectories and manifest

        Returns:
            Tuple of (manifest, stats)
        """
        source_dir = Path(source_dir)
        output_dir = Path(output_dir)

        self.prepare_output_dirs(output_dir)

        images = list_source_images(source_dir)
        stats = OptimizationStats(total_images=len(images))
        manifest = ImageManifest()

        self.logger.info(f"Found {len(images)} images to process")

        for index, image_path in enumerate(images, start=1):
            self.logger.info(f"Processing {image_path.name}...")
            if self._process_image(image_path, output_dir, manifest, stats):
                stats.processed += 1
            self.logger.info(f"Processed {index}/{len(images)}: {image_path.name}")

        manifest_path = output_dir / MANIFEST_FILENAME
        manifest.save(manifest_path)

        self.logger.info(
            f"Optimization complete: {stats.variants_written} variants written, "
            f"{stats.errors} errors ({stats.elapsed_seconds:.1f}s)"
        )

        return manifest, stats

    def _process_image(
        self,
        image_path: Path,
        output_dir: Path,
        manifest: ImageManifest,
        stats: OptimizationStats
    ) -> bool:
        """Run every preset for one image. True if any preset succeeded."""
        any_written = False

        for preset in self.presets:
            try:
                outputs = self.encoder.encode(image_path, output_dir / preset.name, preset)
            except Exception as e:
                error_msg = f"Error processing {image_path.name} ({preset.name}): {e}"
                self.logger.error(error_msg)
                stats.record_error(error_msg)
                continue

            manifest.add_variants(image_path.name, preset.name, outputs)
            stats.variants_written += 1
            any_written = True
            self.logger.debug(f"  {preset.name}: {outputs['webp']}, {outputs['jpeg']}")

        return any_written
