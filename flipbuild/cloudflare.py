"""
CloudflareBuilder - Packages the flipbook site for Cloudflare Pages.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .build_config import DEFAULT_BUILD_DIR, DEFAULT_SOURCE_DIR
from .encoders import ImageEncoder, PillowEncoder
from .headers import write_headers_file
from .html_patch import rewrite_index
from .manifest import ImageManifest
from .presets import CLOUDFLARE_PRESETS, Preset, list_source_images


@dataclass
class BuildResult:
    """
    Outcome of a build.

    Attributes:
        use_optimized: Whether variants were generated (False = originals copied)
        manifest: Variant paths per image, kept in memory only
        html_patched: Whether the slide template was rewritten
        image_count: Source images found
        fallback_copies: Images copied verbatim after an encoding failure
    """
    use_optimized: bool
    manifest: ImageManifest
    html_patched: bool = False
    image_count: int = 0
    fallback_copies: List[str] = field(default_factory=list)


class CloudflareBuilder:
    """
    Builds a deployable directory: index.html, optimized pages/ and _headers.

    The build directory is removed and recreated on every run.
    """

    def __init__(
        self,
        source_dir: Union[str, Path] = DEFAULT_SOURCE_DIR,
        build_dir: Union[str, Path] = DEFAULT_BUILD_DIR,
        encoder: Optional[ImageEncoder] = None,
        presets: Sequence[Preset] = CLOUDFLARE_PRESETS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize builder.

        Args:
            source_dir: Site directory containing index.html and pages/
            build_dir: Output directory
            encoder: Variant encoder (default: PillowEncoder)
            presets: Presets to generate, in processing order
            logger: Optional logger instance
        """
        self.source_dir = Path(source_dir)
        self.build_dir = Path(build_dir)
        self.logger = logger or logging.getLogger(__name__)
        self.encoder = encoder or PillowEncoder(logger=self.logger)
        self.presets = tuple(presets)

    @property
    def pages_dir(self) -> Path:
        return self.build_dir / 'pages'

    def build(self) -> BuildResult:
        """Run the full build. Errors other than per-image encoding failures propagate."""
        self.logger.info("Building for Cloudflare Pages...")

        self._clean_build_dir()

        self.logger.info("Copying static files...")
        shutil.copyfile(self.source_dir / 'index.html', self.build_dir / 'index.html')

        self.pages_dir.mkdir(parents=True, exist_ok=True)

        use_optimized = self.encoder.is_available()
        if use_optimized:
            self.logger.info(f"Using {self.encoder.name} for image optimization...")
        else:
            self.logger.info(f"{self.encoder.name} not available, copying original images...")

        images = list_source_images(self.source_dir / 'pages')
        self.logger.info(f"Processing {len(images)} images...")

        result = BuildResult(
            use_optimized=use_optimized,
            manifest=ImageManifest(),
            image_count=len(images),
        )

        if use_optimized:
            for image_path in images:
                self.logger.info(f"Optimizing {image_path.name}...")
                self._optimize_image(image_path, result)
        else:
            for image_path in images:
                shutil.copyfile(image_path, self.pages_dir / image_path.name)

        result.html_patched = rewrite_index(
            self.build_dir / 'index.html', use_optimized, log=self.logger
        )
        write_headers_file(self.build_dir)

        self.logger.info(f"Build complete! Deploy the {self.build_dir} directory to Cloudflare Pages.")
        return result

    def _clean_build_dir(self) -> None:
        if self.build_dir.exists():
            shutil.rmtree(self.build_dir)
        self.build_dir.mkdir(parents=True)

    def _optimize_image(self, image_path: Path, result: BuildResult) -> None:
        """Encode every preset; on failure fall back to a copy of the original."""
        for preset in self.presets:
            try:
                outputs = self.encoder.encode(image_path, self.pages_dir, preset)
            except Exception as e:
                self.logger.error(f"Error processing {image_path.name} with {self.encoder.name}: {e}")
                fallback = self.pages_dir / image_path.name
                shutil.copyfile(image_path, fallback)
                result.manifest.add_original(image_path.name, preset.name, str(fallback))
                if image_path.name not in result.fallback_copies:
                    result.fallback_copies.append(image_path.name)
                continue

            result.manifest.add_variants(image_path.name, preset.name, outputs)
