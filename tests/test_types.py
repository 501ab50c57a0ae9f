"""Tests for configuration types."""

import pytest

import datatables_config
from datatables_config.types import (
    DEFAULT_GROUP_NAME,
    ConfigurationKey,
    ResolvedConfiguration,
    TableConfiguration,
)


class TestConfigurationKey:
    """Tests for ConfigurationKey lookup."""

    def test_find_by_name(self):
        assert ConfigurationKey.find_by_name("ajax.pipeSize") is ConfigurationKey.AJAX_PIPE_SIZE
        assert ConfigurationKey.find_by_name("i18n.msg.resolver") is ConfigurationKey.INTERNAL_MESSAGE_RESOLVER

    def test_unknown_name(self):
        assert ConfigurationKey.find_by_name("feature.nope") is None
        assert ConfigurationKey.find_by_name("") is None

    def test_names_unique(self):
        names = [key.canonical_name for key in ConfigurationKey]
        assert len(names) == len(set(names))

    def test_locale_resolver_not_a_key(self):
        assert ConfigurationKey.find_by_name("i18n.locale.resolver") is None


class TestTableConfiguration:
    """Tests for TableConfiguration accessors."""

    def test_mapping_access(self):
        conf = TableConfiguration(options={ConfigurationKey.FEATURE_INFO: "true"})

        assert conf[ConfigurationKey.FEATURE_INFO] == "true"
        assert ConfigurationKey.FEATURE_INFO in conf
        assert ConfigurationKey.FEATURE_SORT not in conf
        assert len(conf) == 1
        assert list(conf.keys()) == [ConfigurationKey.FEATURE_INFO]
        assert list(conf) == [ConfigurationKey.FEATURE_INFO]
        assert dict(conf) == {ConfigurationKey.FEATURE_INFO: "true"}

    def test_get_blank_is_default(self):
        conf = TableConfiguration(options={ConfigurationKey.CSS_CLASS: "  "})
        assert conf.get(ConfigurationKey.CSS_CLASS) is None
        assert conf.get(ConfigurationKey.CSS_CLASS, "table") == "table"

    def test_get_bool(self):
        conf = TableConfiguration(options={
            ConfigurationKey.FEATURE_INFO: "TRUE",
            ConfigurationKey.FEATURE_SORT: "off",
            ConfigurationKey.FEATURE_PAGINATE: "maybe",
        })
        assert conf.get_bool(ConfigurationKey.FEATURE_INFO) is True
        assert conf.get_bool(ConfigurationKey.FEATURE_SORT) is False
        assert conf.get_bool(ConfigurationKey.FEATURE_STATE_SAVE) is None
        with pytest.raises(ValueError, match="feature.paginate"):
            conf.get_bool(ConfigurationKey.FEATURE_PAGINATE)

    def test_get_int(self):
        conf = TableConfiguration(options={
            ConfigurationKey.AJAX_PIPE_SIZE: " 5 ",
            ConfigurationKey.FEATURE_DISPLAY_LENGTH: "ten",
        })
        assert conf.get_int(ConfigurationKey.AJAX_PIPE_SIZE) == 5
        assert conf.get_int(ConfigurationKey.PLUGIN_FIXED_OFFSET_TOP, 0) == 0
        with pytest.raises(ValueError):
            conf.get_int(ConfigurationKey.FEATURE_DISPLAY_LENGTH)

    def test_get_list(self):
        conf = TableConfiguration(options={ConfigurationKey.EXPORT_TYPES: "csv, xls,,pdf "})
        assert conf.get_list(ConfigurationKey.EXPORT_TYPES) == ["csv", "xls", "pdf"]
        assert conf.get_list(ConfigurationKey.EXPORT_LINKS) == []

    def test_with_overrides(self):
        """Programmatic overrides return a new configuration."""
        request = object()
        conf = TableConfiguration(
            options={ConfigurationKey.MAIN_COMPRESSOR_ENABLE: "false"},
            request=request,
        )

        updated = conf.with_overrides({
            ConfigurationKey.MAIN_COMPRESSOR_ENABLE: True,
            ConfigurationKey.AJAX_PIPE_SIZE: 12,
        })

        assert updated.get_bool(ConfigurationKey.MAIN_COMPRESSOR_ENABLE) is True
        assert updated.get_int(ConfigurationKey.AJAX_PIPE_SIZE) == 12
        assert updated.request is request
        assert conf.get_bool(ConfigurationKey.MAIN_COMPRESSOR_ENABLE) is False

    def test_request_not_serialized(self):
        conf = TableConfiguration(options={ConfigurationKey.FEATURE_INFO: "true"}, request=object())
        assert conf.model_dump() == {"options": {ConfigurationKey.FEATURE_INFO: "true"}}


class TestResolvedConfiguration:
    """Tests for ResolvedConfiguration."""

    def test_default_group(self):
        conf = TableConfiguration()
        resolved = ResolvedConfiguration(configurations={DEFAULT_GROUP_NAME: conf})

        assert resolved.default is conf
        assert resolved.groups == {DEFAULT_GROUP_NAME}


class TestPackageExports:
    """Tests for the lazily imported public API."""

    def test_lazy_attributes(self):
        assert datatables_config.ConfigurationKey is ConfigurationKey
        assert callable(datatables_config.resolve_configurations)
        assert datatables_config.StandardConfigurationLoader.__name__ == "StandardConfigurationLoader"

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            datatables_config.DoesNotExist
