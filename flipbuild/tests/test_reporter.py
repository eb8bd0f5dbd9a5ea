"""Tests for size comparison and Reporter class."""

import io

import pytest

from flipbuild.manifest import ImageManifest
from flipbuild.reporter import Reporter, SizeComparison, compute_size_comparison


@pytest.fixture
def sized_tree(tmp_path):
    """Fixture providing source and output trees with known file sizes."""
    src = tmp_path / 'pages'
    src.mkdir()
    (src / 'a.jpg').write_bytes(b'x' * 600_000)
    (src / 'b.png').write_bytes(b'x' * 400_000)
    (src / 'readme.txt').write_bytes(b'x' * 999_999)

    out = tmp_path / 'out'
    (out / 'mobile').mkdir(parents=True)
    (out / 'tablet').mkdir()
    (out / 'mobile' / 'a-mobile.webp').write_bytes(b'x' * 50_000)
    (out / 'mobile' / 'a-mobile.jpg').write_bytes(b'x' * 70_000)
    (out / 'tablet' / 'a-tablet.webp').write_bytes(b'x' * 80_000)
    # The manifest sits beside the preset dirs and is not counted.
    (out / 'image-manifest.json').write_bytes(b'x' * 10_000)
    return src, out


class TestSizeComparison:
    """Tests for SizeComparison and compute_size_comparison."""

    def test_compute_from_known_sizes(self, sized_tree):
        """Test totals only count source images and preset directory files."""
        src, out = sized_tree

        comparison = compute_size_comparison(src, out)

        assert comparison.original_bytes == 1_000_000
        assert comparison.optimized_bytes == 200_000

    def test_reduction_percent(self, sized_tree):
        """Test reduction matches round((orig - opt) / orig * 100, 1)."""
        comparison = compute_size_comparison(*sized_tree)

        assert comparison.reduction_percent == round((1_000_000 - 200_000) / 1_000_000 * 100, 1)
        assert comparison.reduction_percent == 80.0

    def test_reduction_rounds_to_one_decimal(self):
        comparison = SizeComparison(original_bytes=3, optimized_bytes=1)

        assert comparison.reduction_percent == 66.7

    def test_growth_is_negative(self):
        comparison = SizeComparison(original_bytes=100, optimized_bytes=250)

        assert comparison.reduction_percent == -150.0

    def test_no_source_bytes(self):
        """Test an empty source set has no reduction figure."""
        comparison = SizeComparison(original_bytes=0, optimized_bytes=0)

        assert comparison.reduction_percent is None

    def test_megabytes(self):
        comparison = SizeComparison(original_bytes=3 * 1024 * 1024, optimized_bytes=1536 * 1024)

        assert comparison.original_mb == 3.0
        assert comparison.optimized_mb == 1.5


class TestReporter:
    """Tests for Reporter class."""

    def test_init_default_output(self):
        """Test default output is stdout."""
        import sys
        reporter = Reporter()
        assert reporter.output == sys.stdout

    def test_report_size_comparison(self):
        output = io.StringIO()
        comparison = SizeComparison(original_bytes=10 * 1024 * 1024, optimized_bytes=2 * 1024 * 1024)

        Reporter(output=output).report_size_comparison(comparison)

        result = output.getvalue()
        assert 'Size comparison:' in result
        assert 'Original total: 10.00 MB' in result
        assert 'Optimized total: 2.00 MB' in result
        assert 'Size reduction: 80.0%' in result

    def test_report_size_comparison_empty(self):
        """Test the empty source case prints N/A."""
        output = io.StringIO()

        Reporter(output=output).report_size_comparison(SizeComparison(0, 0))

        assert 'Size reduction: N/A' in output.getvalue()

    def test_report_manifest(self):
        manifest = ImageManifest()
        for preset in ('mobile', 'tablet', 'desktop', 'thumbnail'):
            manifest.add_variants('page1.jpg', preset, {'webp': 'w', 'jpeg': 'j'})
        manifest.add_variants('page2.jpg', 'mobile', {'webp': 'w', 'jpeg': 'j'})
        output = io.StringIO()

        Reporter(output=output).report_manifest(manifest)

        result = output.getvalue()
        assert 'IMAGE MANIFEST SUMMARY' in result
        assert 'Images:          2' in result
        assert 'Incomplete images: 1' in result
        assert 'page2.jpg' in result
