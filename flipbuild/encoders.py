"""
Encoders - Resize-and-encode strategies producing WebP and JPEG variants.

Two interchangeable implementations share the ImageEncoder interface:
    ImageMagickEncoder shells out to the ImageMagick `convert` binary.
    PillowEncoder resizes and encodes in-process.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import sh
from PIL import Image, features

from .presets import Preset


PathLike = Union[str, Path]


class ImageEncoder:
    """
    Base class for variant encoders.

    Subclasses implement `is_available` and `_write`.
    """

    name = 'base'

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def is_available(self) -> bool:
        """Probe whether this encoder can run in the current environment."""
        raise NotImplementedError

    def encode(
        self,
        input_path: PathLike,
        output_dir: PathLike,
        preset: Preset
    ) -> Dict[str, str]:
        """
        Write the WebP and JPEG variants of one image for one preset.

        Args:
            input_path: Source image
            output_dir: Directory receiving both outputs (must exist)
            preset: Width/quality/suffix to apply

        Returns:
            Dict with 'webp' and 'jpeg' output paths

        Raises:
            Exception: Whatever the underlying tool raises; nothing is retried
        """
        input_path = Path(input_path)
        output_dir = Path(output_dir)
        stem = input_path.stem

        webp_path = output_dir / preset.output_name(stem, 'webp')
        jpeg_path = output_dir / preset.output_name(stem, 'jpg')

        self._write(input_path, webp_path, 'WEBP', preset)
        self._write(input_path, jpeg_path, 'JPEG', preset)

        return {'webp': str(webp_path), 'jpeg': str(jpeg_path)}

    def _write(self, input_path: Path, output_path: Path, output_format: str, preset: Preset) -> None:
        raise NotImplementedError


class ImageMagickEncoder(ImageEncoder):
    """
    Encodes variants with the ImageMagick command line tool.
    """

    name = 'imagemagick'

    INSTALL_HINTS = (
        'macOS: brew install imagemagick',
        'Ubuntu: sudo apt-get install imagemagick',
        'Windows: Download from https://imagemagick.org/',
    )

    def __init__(
        self,
        binary: str = 'convert',
        command: Optional[Callable] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize ImageMagick encoder.

        Args:
            binary: Name or path of the convert executable
            command: Pre-built callable to use instead of looking up `binary`
            logger: Optional logger instance
        """
        super().__init__(logger)
        self.binary = binary
        self._command = command

    @property
    def command(self) -> Callable:
        if self._command is None:
            self._command = sh.Command(self.binary)
        return self._command

    def is_available(self) -> bool:
        try:
            self.command('-version')
        except (sh.CommandNotFound, sh.ErrorReturnCode) as e:
            self.logger.debug(f"{self.binary} probe failed: {e}")
            return False
        return True

    @staticmethod
    def _path_arg(path: Path) -> str:
        """Keep names starting with '-' from being read as options."""
        if path.is_absolute():
            return str(path)
        return os.path.join(os.curdir, str(path))

    def _write(self, input_path: Path, output_path: Path, output_format: str, preset: Preset) -> None:
        # Output format follows the file extension.
        self.command(
            self._path_arg(input_path),
            '-resize', preset.resize_geometry,
            '-quality', str(preset.quality),
            self._path_arg(output_path)
        )


class PillowEncoder(ImageEncoder):
    """
    Encodes variants in-process using Pillow.
    """

    name = 'pillow'

    # Height bound for thumbnail(); only the width constrains the result.
    MAX_HEIGHT = 1_000_000

    def is_available(self) -> bool:
        available = features.check('webp')
        if not available:
            self.logger.debug("Pillow was built without WebP support")
        return bool(available)

    def _write(self, input_path: Path, output_path: Path, output_format: str, preset: Preset) -> None:
        try:
            with Image.open(input_path) as img:
                img.load()
                if output_format == 'JPEG':
                    img = self._convert_color_mode(img)
                elif img.mode in ('P', 'PA', 'LA'):
                    img = img.convert('RGBA')
                elif img.mode not in ('RGB', 'RGBA'):
                    img = img.convert('RGB')

                img.thumbnail((preset.width, self.MAX_HEIGHT), Image.Resampling.LANCZOS)

                if output_format == 'JPEG':
                    img.save(output_path, format='JPEG', quality=preset.quality, optimize=True)
                else:
                    img.save(output_path, format='WEBP', quality=preset.quality)
        except Exception as e:
            self.logger.error(f"Error encoding {input_path.name} as {output_format}: {e}")
            raise

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Flatten transparency onto white for JPEG output."""
        if img.mode in ('RGBA', 'LA'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'LA':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode == 'P':
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode != 'RGB':
            return img.convert('RGB')
        return img


ENCODERS = {
    ImageMagickEncoder.name: ImageMagickEncoder,
    PillowEncoder.name: PillowEncoder,
}


def get_encoder(name: str, logger: Optional[logging.Logger] = None) -> ImageEncoder:
    """Instantiate an encoder by name ('imagemagick' or 'pillow')."""
    try:
        encoder_cls = ENCODERS[name]
    except KeyError:
        raise ValueError(f"Unknown encoder: {name!r} (choose from {', '.join(sorted(ENCODERS))})")
    return encoder_cls(logger=logger)
