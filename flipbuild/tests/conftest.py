"""
Pytest fixtures for flipbuild tests.
"""

import logging

import pytest
from PIL import Image

from flipbuild.encoders import ImageEncoder


INDEX_HTML = """<!DOCTYPE html>
<html>
<head><title>Flipbook</title></head>
<body>
<div id="book"></div>
<script>
  for (let i = 1; i <= 2; i++) {
    const slide = document.createElement('div');
    slide.innerHTML = `<div class="slide-inner"><img src="pages/page${i}.jpg" /></div>`;
    document.getElementById('book').appendChild(slide);
  }
</script>
</body>
</html>
"""


class FakeEncoder(ImageEncoder):
    """Encoder writing small marker files; fails for selected images or (image, preset) pairs."""

    name = 'fake'

    def __init__(self, available=True, fail_on=()):
        super().__init__(logger=logging.getLogger('test'))
        self.available = available
        self.fail_on = set(fail_on)
        self.calls = []

    def is_available(self):
        return self.available

    def _write(self, input_path, output_path, output_format, preset):
        self.calls.append((input_path.name, preset.name, output_format))
        if input_path.name in self.fail_on or (input_path.name, preset.name) in self.fail_on:
            raise RuntimeError(f"cannot encode {input_path.name}")
        output_path.write_bytes(f"{output_format}:{preset.name}:{input_path.name}".encode())


@pytest.fixture
def fake_encoder_cls():
    """Fixture providing the FakeEncoder class."""
    return FakeEncoder


@pytest.fixture
def make_image():
    """Fixture providing a factory that writes a solid-color image to disk."""
    def _make(path, size=(1000, 500), mode='RGB', color='red', fmt=None):
        img = Image.new(mode, size, color=color)
        img.save(path, format=fmt)
        return path
    return _make


@pytest.fixture
def source_dir(tmp_path, make_image):
    """Fixture providing a directory with two JPEGs, a PNG and non-image files."""
    src = tmp_path / 'pages'
    src.mkdir()
    make_image(src / 'page1.jpg', size=(1000, 500))
    make_image(src / 'page2.JPEG', size=(2400, 1200), fmt='JPEG')
    make_image(src / 'cover.png', size=(400, 400), mode='RGBA', color=(0, 0, 255, 128))
    (src / 'notes.txt').write_text('not an image')
    (src / 'nested.jpg').mkdir()
    return src


@pytest.fixture
def flipbook_site(tmp_path, make_image):
    """Fixture providing a flipbook-v2 style site with index.html and pages/."""
    site = tmp_path / 'flipbook-v2'
    pages = site / 'pages'
    pages.mkdir(parents=True)
    (site / 'index.html').write_text(INDEX_HTML)
    make_image(pages / 'page1.jpg', size=(1600, 1000))
    make_image(pages / 'page2.jpg', size=(700, 1000), color='green')
    return site


@pytest.fixture
def index_html():
    """Fixture providing the flipbook index.html text."""
    return INDEX_HTML


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    return logging.getLogger('test')
