"""
ImageManifest - Maps each source image to its generated variant paths.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union


MANIFEST_FILENAME = 'image-manifest.json'


@dataclass
class ImageManifest:
    """
    Accumulates variant paths during a run and serializes them once at the end.

    Serialized shape:
        {source_filename: {preset_name: {'webp': ..., 'jpeg': ...}}}
    or, for a fallback copy:
        {source_filename: {preset_name: {'original': ...}}}

    A source file only gets a key once at least one preset succeeded.
    """
    entries: Dict[str, Dict[str, Dict[str, str]]] = field(default_factory=dict)

    def add_variants(self, filename: str, preset_name: str, outputs: Dict[str, str]) -> None:
        """Record the WebP/JPEG outputs for one (file, preset) pair."""
        self.entries.setdefault(filename, {})[preset_name] = {
            'webp': outputs['webp'],
            'jpeg': outputs['jpeg'],
        }

    def add_original(self, filename: str, preset_name: str, path: str) -> None:
        """Record a verbatim copy used in place of the variants."""
        self.entries.setdefault(filename, {})[preset_name] = {'original': path}

    @property
    def filenames(self) -> List[str]:
        return list(self.entries)

    @property
    def total_images(self) -> int:
        return len(self.entries)

    def variant_count(self, preset_name: str) -> int:
        """Number of images with encoded variants for a preset."""
        return sum(
            1 for presets in self.entries.values()
            if 'webp' in presets.get(preset_name, {})
        )

    @property
    def fallback_count(self) -> int:
        """Number of (file, preset) pairs recorded as original copies."""
        return sum(
            1 for presets in self.entries.values()
            for outputs in presets.values()
            if 'original' in outputs
        )

    def to_dict(self) -> dict:
        return {
            filename: {name: dict(outputs) for name, outputs in presets.items()}
            for filename, presets in self.entries.items()
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ImageManifest':
        manifest = cls()
        for filename, presets in data.items():
            for preset_name, outputs in presets.items():
                manifest.entries.setdefault(filename, {})[preset_name] = dict(outputs)
        return manifest

    def save(self, filepath: Union[str, Path]) -> None:
        """Save manifest as indented JSON."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'ImageManifest':
        """Load manifest from a JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Manifest {filepath} is not a JSON object")
        return cls.from_dict(data)
