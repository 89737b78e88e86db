"""
Tests for locale projection.
"""
from app.utils.localization import normalize_locale, resolve_localized


class TestResolveLocalized:
    def test_requested_locale_present(self):
        assert resolve_localized({"en": "Hello", "hi": "नमस्ते"}, "hi") == "नमस्ते"

    def test_falls_back_to_default_locale(self):
        assert resolve_localized({"en": "Hello", "hi": "नमस्ते"}, "fr") == "Hello"

    def test_missing_everywhere_is_none(self):
        assert resolve_localized({"hi": "नमस्ते"}, "fr") is None

    def test_empty_string_counts_as_missing(self):
        assert resolve_localized({"en": "Hello", "hi": ""}, "hi") == "Hello"

    def test_none_and_empty_maps(self):
        assert resolve_localized(None, "en") is None
        assert resolve_localized({}, "en") is None

    def test_no_locale_uses_default(self):
        assert resolve_localized({"en": "Hello", "hi": "नमस्ते"}) == "Hello"

    def test_custom_default_locale(self):
        assert resolve_localized({"hi": "नमस्ते", "mr": "नमस्कार"}, "fr", default_locale="mr") == "नमस्कार"

    def test_non_mapping_never_raises(self):
        assert resolve_localized("Hello", "en") is None


class TestNormalizeLocale:
    def test_blank_means_default(self):
        assert normalize_locale(None) == "en"
        assert normalize_locale("  ") == "en"

    def test_lowercases_and_trims(self):
        assert normalize_locale(" HI ") == "hi"
