"""
Reporter - Size comparison and manifest summaries.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from .manifest import ImageManifest
from .presets import LOCAL_PRESETS, Preset, list_source_images


BYTES_PER_MB = 1024 * 1024


@dataclass
class SizeComparison:
    """
    Total bytes before and after optimization.

    Attributes:
        original_bytes: Sum of the source images
        optimized_bytes: Sum of every file in the preset output directories
    """
    original_bytes: int
    optimized_bytes: int

    @property
    def original_mb(self) -> float:
        return round(self.original_bytes / BYTES_PER_MB, 2)

    @property
    def optimized_mb(self) -> float:
        return round(self.optimized_bytes / BYTES_PER_MB, 2)

    @property
    def reduction_percent(self) -> Optional[float]:
        """
        Percentage saved, rounded to one decimal.

        None when there were no source bytes to compare against.
        """
        if self.original_bytes == 0:
            return None
        saved = self.original_bytes - self.optimized_bytes
        return round(saved / self.original_bytes * 100, 1)


def compute_size_comparison(
    source_dir: Union[str, Path],
    output_dir: Union[str, Path],
    presets: Sequence[Preset] = LOCAL_PRESETS
) -> SizeComparison:
    """Sum source image sizes and the sizes of all files under each preset directory."""
    original_bytes = sum(p.stat().st_size for p in list_source_images(source_dir))

    optimized_bytes = 0
    for preset in presets:
        preset_dir = Path(output_dir) / preset.name
        if not preset_dir.is_dir():
            continue
        optimized_bytes += sum(
            p.stat().st_size for p in preset_dir.iterdir() if p.is_file()
        )

    return SizeComparison(original_bytes=original_bytes, optimized_bytes=optimized_bytes)


class Reporter:
    """
    Prints human-readable reports.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def report_size_comparison(self, comparison: SizeComparison) -> None:
        """Print before/after totals and the reduction."""
        self._print()
        self._print("Size comparison:")
        self._print(f"Original total: {comparison.original_mb:.2f} MB")
        self._print(f"Optimized total: {comparison.optimized_mb:.2f} MB")

        reduction = comparison.reduction_percent
        if reduction is None:
            self._print("Size reduction: N/A (no source images)")
        else:
            self._print(f"Size reduction: {reduction:.1f}%")

    def report_manifest(self, manifest: ImageManifest, presets: Sequence[Preset] = LOCAL_PRESETS) -> None:
        """Summarize an image manifest."""
        self._print("=" * 60)
        self._print("IMAGE MANIFEST SUMMARY")
        self._print("=" * 60)
        self._print()
        self._print(f"  Images:          {manifest.total_images:,}")
        self._print(f"  Fallback copies: {manifest.fallback_count:,}")
        self._print()

        self._print(f"  {'Preset':<12} {'Width':>6} {'Quality':>8} {'Variants':>10}")
        self._print(f"  {'-'*12} {'-'*6} {'-'*8} {'-'*10}")
        for preset in presets:
            count = manifest.variant_count(preset.name)
            self._print(f"  {preset.name:<12} {preset.width:>6} {preset.quality:>8} {count:>10,}")

        missing = [
            filename for filename, entries in manifest.entries.items()
            if any(preset.name not in entries for preset in presets)
        ]
        if missing:
            self._print()
            self._print(f"  Incomplete images: {len(missing):,}")
            for filename in sorted(missing):
                self._print(f"    {filename}")
        self._print()
