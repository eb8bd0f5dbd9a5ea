"""
OptimizationStats - Statistics for an optimization run.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class OptimizationStats:
    """
    Statistics for an optimization run.

    Attributes:
        total_images: Source images found
        processed: Images with at least one preset written
        variants_written: Successful (image, preset) pairs
        errors: Failed (image, preset) pairs
        start_time: Start timestamp
        error_details: List of error messages
    """
    total_images: int = 0
    processed: int = 0
    variants_written: int = 0
    errors: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def completed_count(self) -> int:
        """Total attempted pairs (written + errors)."""
        return self.variants_written + self.errors

    def record_error(self, message: str) -> None:
        self.errors += 1
        self.error_details.append(message)
