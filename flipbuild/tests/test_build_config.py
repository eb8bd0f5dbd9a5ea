"""Tests for BuildConfig class."""

from flipbuild.build_config import BuildConfig


class TestBuildConfig:
    """Tests for BuildConfig class."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('FLIPBOOK_SOURCE_DIR', raising=False)
        monkeypatch.delenv('FLIPBOOK_BUILD_DIR', raising=False)

        config = BuildConfig.from_env()

        assert config.source_dir == './flipbook-v2'
        assert config.build_dir == './dist'

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('FLIPBOOK_SOURCE_DIR', '/srv/site')
        monkeypatch.setenv('FLIPBOOK_BUILD_DIR', '/srv/out')

        config = BuildConfig.from_env()

        assert config.source_dir == '/srv/site'
        assert config.build_dir == '/srv/out'

    def test_validate_ok(self, flipbook_site, tmp_path):
        config = BuildConfig(source_dir=str(flipbook_site), build_dir=str(tmp_path / 'dist'))

        assert config.validate() == []

    def test_validate_missing_source(self, tmp_path):
        config = BuildConfig(source_dir=str(tmp_path / 'missing'), build_dir=str(tmp_path / 'dist'))

        errors = config.validate()

        assert len(errors) == 1
        assert 'Source directory not found' in errors[0]

    def test_validate_missing_index(self, tmp_path):
        (tmp_path / 'site').mkdir()
        config = BuildConfig(source_dir=str(tmp_path / 'site'), build_dir=str(tmp_path / 'dist'))

        assert 'index.html not found' in config.validate()[0]

    def test_validate_same_directory(self, flipbook_site):
        config = BuildConfig(source_dir=str(flipbook_site), build_dir=str(flipbook_site))

        assert config.validate() == ["Build directory must differ from the source directory"]

    def test_validate_build_dir_contains_source(self, flipbook_site):
        """Test a build dir above the source is rejected since it gets wiped."""
        config = BuildConfig(source_dir=str(flipbook_site), build_dir=str(flipbook_site.parent))

        assert config.validate() == [
            f"Build directory {flipbook_site.parent} contains the source directory"
        ]

    def test_validate_build_dir_inside_source(self, flipbook_site):
        config = BuildConfig(source_dir=str(flipbook_site), build_dir=str(flipbook_site / 'dist'))

        assert config.validate() == []
