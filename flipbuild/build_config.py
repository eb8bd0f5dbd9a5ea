"""
BuildConfig - Paths for the Cloudflare Pages build.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List


DEFAULT_SOURCE_DIR = './flipbook-v2'
DEFAULT_BUILD_DIR = './dist'


@dataclass
class BuildConfig:
    """
    Locations used by the Cloudflare build.

    Attributes:
        source_dir: Site to package (must contain index.html and pages/)
        build_dir: Output directory, wiped on every build
    """
    source_dir: str = DEFAULT_SOURCE_DIR
    build_dir: str = DEFAULT_BUILD_DIR

    @classmethod
    def from_env(cls) -> 'BuildConfig':
        """Read FLIPBOOK_SOURCE_DIR / FLIPBOOK_BUILD_DIR, falling back to defaults."""
        return cls(
            source_dir=os.getenv('FLIPBOOK_SOURCE_DIR', DEFAULT_SOURCE_DIR),
            build_dir=os.getenv('FLIPBOOK_BUILD_DIR', DEFAULT_BUILD_DIR),
        )

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty when valid)."""
        errors = []
        source = Path(self.source_dir)

        if not source.is_dir():
            errors.append(f"Source directory not found: {self.source_dir}")
        elif not (source / 'index.html').is_file():
            errors.append(f"index.html not found in {self.source_dir}")

        # The build dir is deleted before each build.
        build = Path(self.build_dir).resolve()
        if source.resolve() == build:
            errors.append("Build directory must differ from the source directory")
        elif build in source.resolve().parents:
            errors.append(f"Build directory {self.build_dir} contains the source directory")

        return errors
