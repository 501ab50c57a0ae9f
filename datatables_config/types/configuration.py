"""
Configuration Keys

The closed set of options understood by the table rendering layer.

Each member's value is its canonical dotted name, which is also the key used
in properties files once the group prefix is stripped:

    global.feature.paginationType=full_numbers
           ^^^^^^^^^^^^^^^^^^^^^^ ConfigurationKey.FEATURE_PAGINATION_TYPE
"""

from __future__ import annotations

from enum import Enum

DEFAULT_GROUP_NAME = "global"
"""Group every other group inherits from. Always resolved."""

LOCALE_RESOLVER_KEY = "i18n.locale.resolver"
"""Reserved key: read by the locale detection, never part of a group."""


class ConfigurationKey(str, Enum):
    """Recognised table options, keyed by canonical dotted name."""

    # === Main ===
    MAIN_BASE_PACKAGE = "main.base.package"
    MAIN_BASE_URL = "main.base.url"
    MAIN_CDN = "main.cdn"
    MAIN_STANDALONE = "main.standalone"
    MAIN_COMPRESSOR_ENABLE = "main.compressor.enable"
    MAIN_COMPRESSOR_CLASS = "main.compressor.class"
    MAIN_COMPRESSOR_MODE = "main.compressor.mode"
    MAIN_COMPRESSOR_MUNGE = "main.compressor.munge"
    MAIN_COMPRESSOR_PRESERVE_SEMI = "main.compressor.preservesemicolons"
    MAIN_COMPRESSOR_DISABLE_OPTI = "main.compressor.disableoptimizations"
    MAIN_AGGREGATOR_ENABLE = "main.aggregator.enable"
    MAIN_AGGREGATOR_MODE = "main.aggregator.mode"

    # === Features ===
    FEATURE_INFO = "feature.info"
    FEATURE_AUTO_WIDTH = "feature.autoWidth"
    FEATURE_FILTERABLE = "feature.filterable"
    FEATURE_PAGINATE = "feature.paginate"
    FEATURE_PAGINATION_TYPE = "feature.paginationType"
    FEATURE_LENGTH_CHANGE = "feature.lengthChange"
    FEATURE_SORT = "feature.sort"
    FEATURE_STATE_SAVE = "feature.stateSave"
    FEATURE_PROCESSING = "feature.processing"
    FEATURE_JQUERY_UI = "feature.jqueryUI"
    FEATURE_DISPLAY_LENGTH = "feature.displayLength"
    FEATURE_LENGTH_MENU = "feature.lengthMenu"
    FEATURE_DOM = "feature.dom"
    FEATURE_SCROLL_Y = "feature.scrollY"
    FEATURE_SCROLL_COLLAPSE = "feature.scrollCollapse"
    FEATURE_APPEAR = "feature.appear"

    # === CSS ===
    CSS_CLASS = "css.class"
    CSS_STYLE = "css.style"
    CSS_STRIPE_CLASSES = "css.stripeClasses"
    CSS_THEME = "css.theme"
    CSS_THEME_OPTION = "css.themeOption"

    # === Ajax ===
    AJAX_SOURCE = "ajax.source"
    AJAX_SERVER_SIDE = "ajax.serverSide"
    AJAX_DEFER_RENDER = "ajax.deferRender"
    AJAX_PIPELINING = "ajax.pipelining"
    AJAX_PIPE_SIZE = "ajax.pipeSize"
    AJAX_SERVER_DATA = "ajax.serverData"
    AJAX_SERVER_PARAM = "ajax.serverParam"
    AJAX_SERVER_METHOD = "ajax.serverMethod"

    # === Plugins ===
    PLUGIN_FIXED_HEADER = "plugin.fixedHeader"
    PLUGIN_FIXED_POSITION = "plugin.fixedPosition"
    PLUGIN_FIXED_OFFSET_TOP = "plugin.fixedOffsetTop"
    PLUGIN_SCROLLER = "plugin.scroller"
    PLUGIN_COL_REORDER = "plugin.colReorder"

    # === Export ===
    EXPORT_TYPES = "export.types"
    EXPORT_LINKS = "export.links"
    EXPORT_CSV_DEFAULT_CLASS = "export.csv.default.class"
    EXPORT_XML_DEFAULT_CLASS = "export.xml.default.class"
    EXPORT_XLS_DEFAULT_CLASS = "export.xls.default.class"
    EXPORT_XLSX_DEFAULT_CLASS = "export.xlsx.default.class"
    EXPORT_PDF_DEFAULT_CLASS = "export.pdf.default.class"
    EXPORT_DEFAULT_FILENAME = "export.default.filename"

    # === Extensions ===
    EXTRA_FILES = "extra.files"
    EXTRA_CONFS = "extra.confs"
    EXTRA_CALLBACKS = "extra.callbacks"
    EXTRA_CUSTOM_FEATURES = "extra.custom.features"
    EXTRA_CUSTOM_PLUGINS = "extra.custom.plugins"
    EXTRA_CUSTOM_EXTENSIONS = "extra.custom.extensions"

    # === i18n ===
    INTERNAL_MESSAGE_RESOLVER = "i18n.msg.resolver"

    @property
    def canonical_name(self) -> str:
        """Dotted name used in properties files."""
        return self.value

    @classmethod
    def find_by_name(cls, name: str) -> ConfigurationKey | None:
        """Exact-match lookup; None for unrecognised names."""
        return _BY_NAME.get(name)


_BY_NAME: dict[str, ConfigurationKey] = {key.value: key for key in ConfigurationKey}
