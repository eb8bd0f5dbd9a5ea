"""
Preset - Named size/quality settings for generated image variants.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union


IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png')

_IMAGE_PATTERN = re.compile(r'\.(jpg|jpeg|png)$', re.IGNORECASE)


@dataclass(frozen=True)
class Preset:
    """
    A single output variant.

    Attributes:
        name: Preset name, also the output subdirectory for the local optimizer
        width: Maximum output width in pixels (never upscaled)
        quality: Encoder quality, 0-100
        suffix: Appended to the source basename (e.g., '-mobile')
    """
    name: str
    width: int
    quality: int
    suffix: str

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Preset {self.name}: width must be positive, got {self.width}")
        if not 0 <= self.quality <= 100:
            raise ValueError(f"Preset {self.name}: quality must be 0-100, got {self.quality}")

    def output_name(self, stem: str, ext: str) -> str:
        """Return '<stem><suffix>.<ext>'."""
        return f"{stem}{self.suffix}.{ext}"

    @property
    def resize_geometry(self) -> str:
        """ImageMagick geometry: fit to width, shrink only."""
        return f"{self.width}x>"


MOBILE = Preset(name='mobile', width=800, quality=75, suffix='-mobile')
TABLET = Preset(name='tablet', width=1200, quality=80, suffix='-tablet')
DESKTOP = Preset(name='desktop', width=1920, quality=85, suffix='-desktop')
THUMBNAIL = Preset(name='thumbnail', width=300, quality=70, suffix='-thumb')

# Declaration order is processing order.
LOCAL_PRESETS = (MOBILE, TABLET, DESKTOP, THUMBNAIL)
CLOUDFLARE_PRESETS = (MOBILE, TABLET, DESKTOP)


def is_source_image(filename: str) -> bool:
    """True for .jpg/.jpeg/.png names, any case."""
    return bool(_IMAGE_PATTERN.search(filename))


def list_source_images(directory: Union[str, Path]) -> List[Path]:
    """
    List image files directly inside a directory.

    Sorted by name so repeated runs process files in the same order.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    directory = Path(directory)
    return [
        directory / name
        for name in sorted(os.listdir(directory))
        if is_source_image(name) and (directory / name).is_file()
    ]
