"""Tests for locale-aware bundle lookup."""

from datatables_config.loading.bundles import (
    bundle_files,
    candidate_suffixes,
    load_bundle,
    normalize_locale,
)


def _write(directory, name, content):
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


class TestNormalizeLocale:
    """Tests for locale tag normalization."""

    def test_empty(self):
        assert normalize_locale(None) == ()
        assert normalize_locale("") == ()

    def test_case_and_separator(self):
        """Language lower-cased, country upper-cased, hyphens accepted."""
        assert normalize_locale("FR-fr") == ("fr", "FR")
        assert normalize_locale("en_US_POSIX") == ("en", "US", "POSIX")

    def test_trailing_empty_parts_dropped(self):
        assert normalize_locale("de_") == ("de",)


class TestCandidateSuffixes:
    """Tests for candidate ordering."""

    def test_most_specific_first(self):
        assert candidate_suffixes("en_US_POSIX") == ["en_US_POSIX", "en_US", "en"]

    def test_no_locale(self):
        assert candidate_suffixes(None) == []


class TestBundleFiles:
    """Tests for bundle file discovery."""

    def test_parent_chain_least_specific_first(self, tmp_path):
        """Base, language and country files all contribute, base first."""
        base = _write(tmp_path, "datatables.properties", "")
        lang = _write(tmp_path, "datatables_fr.properties", "")
        country = _write(tmp_path, "datatables_fr_FR.properties", "")

        assert bundle_files("datatables", "fr_FR", [tmp_path]) == [base, lang, country]

    def test_default_locale_fallback(self, tmp_path):
        """The default locale is tried when the requested one has no file."""
        base = _write(tmp_path, "datatables.properties", "")
        english = _write(tmp_path, "datatables_en.properties", "")

        assert bundle_files("datatables", "ja_JP", [tmp_path], default_locale="en_US") == [
            base,
            english,
        ]

    def test_default_locale_ignored_when_requested_found(self, tmp_path):
        _write(tmp_path, "datatables_en.properties", "")
        german = _write(tmp_path, "datatables_de.properties", "")

        assert bundle_files("datatables", "de_AT", [tmp_path], default_locale="en") == [german]

    def test_first_directory_wins_per_file(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        _write(second, "datatables.properties", "")
        winner = _write(first, "datatables.properties", "")

        assert bundle_files("datatables", None, [first, second]) == [winner]


class TestLoadBundle:
    """Tests for bundle loading and merging."""

    def test_missing_bundle(self, tmp_path):
        """No file at all gives None, not an empty dict."""
        assert load_bundle("datatables", "fr_FR", [tmp_path]) is None

    def test_specific_values_override_parents(self, tmp_path):
        _write(tmp_path, "datatables.properties", "global.feature.info=true\nglobal.css.class=base\n")
        _write(tmp_path, "datatables_fr.properties", "global.feature.info=false\n")

        props = load_bundle("datatables", "fr_CA", [tmp_path])

        assert props == {"global.feature.info": "false", "global.css.class": "base"}
