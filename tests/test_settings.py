"""Tests for DatatablesSettings."""

import pytest

from datatables_config.config.settings import DatatablesSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DATATABLES_CONFIGURATION",
        "DATATABLES_DEFAULT_LOCALE",
        "DATATABLES_JSTL_PRESENT",
        "DATATABLES_CONFIGURATION_LOADER",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDatatablesSettings:
    """Tests for settings construction."""

    def test_defaults(self):
        settings = DatatablesSettings()
        assert settings.user_bundle_name == "datatables"
        assert settings.external_configuration_path is None
        assert settings.search_path == ["."]
        assert settings.jstl_present is False
        assert settings.loader_class.endswith(":StandardConfigurationLoader")

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("DATATABLES_CONFIGURATION", "/etc/app/datatables")
        monkeypatch.setenv("DATATABLES_DEFAULT_LOCALE", "en_US")
        monkeypatch.setenv("DATATABLES_JSTL_PRESENT", "Yes")
        monkeypatch.setenv("DATATABLES_CONFIGURATION_LOADER", "my.module:Loader")

        settings = DatatablesSettings()

        assert settings.external_configuration_path == "/etc/app/datatables"
        assert settings.default_locale == "en_US"
        assert settings.jstl_present is True
        assert settings.loader_class == "my.module:Loader"

    def test_kwargs_override_environment(self, monkeypatch):
        monkeypatch.setenv("DATATABLES_DEFAULT_LOCALE", "en_US")
        assert DatatablesSettings(default_locale="fr").default_locale == "fr"

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            DatatablesSettings(not_a_setting=1)

    def test_search_path_not_shared(self):
        first = DatatablesSettings()
        first.search_path.append("conf")
        assert DatatablesSettings().search_path == ["."]

    def test_with_overrides(self):
        settings = DatatablesSettings(default_locale="fr")
        other = settings.with_overrides(jstl_present=True)

        assert other.jstl_present is True
        assert other.default_locale == "fr"
        assert settings.jstl_present is False


class TestFromFile:
    """Tests for TOML loading."""

    def test_sections(self, tmp_path):
        path = tmp_path / "datatables.toml"
        path.write_text(
            '[bundle]\n'
            'user_bundle_name = "tables"\n'
            'search_path = ["conf", "."]\n'
            '\n'
            '[loader]\n'
            'class = "myapp.config:Loader"\n'
            'jstl_present = true\n'
        )

        settings = DatatablesSettings.from_file(path)

        assert settings.user_bundle_name == "tables"
        assert settings.search_path == ["conf", "."]
        assert settings.loader_class == "myapp.config:Loader"
        assert settings.jstl_present is True

    def test_flat_keys(self, tmp_path):
        path = tmp_path / "datatables.toml"
        path.write_text('default_locale = "de"\n')

        assert DatatablesSettings.from_file(path).default_locale == "de"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DatatablesSettings.from_file(tmp_path / "missing.toml")

    def test_unknown_key_in_file(self, tmp_path):
        path = tmp_path / "datatables.toml"
        path.write_text('[bundle]\nbogus = 1\n')

        with pytest.raises(ValueError):
            DatatablesSettings.from_file(path)
