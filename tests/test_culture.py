"""
Unit tests for CultureInfo.
Tests tag normalization, parent chains and ambient culture detection.
"""
import pytest

from language_manager.core.culture import CultureInfo, normalize_tag


class TestNormalization:
    """Test culture tag parsing."""

    @pytest.mark.parametrize("raw, expected", [
        ("de-DE", "de-DE"),
        ("de_de", "de-DE"),
        ("DE-de", "de-DE"),
        ("zh-hant-tw", "zh-Hant-TW"),
        ("es-419", "es-419"),
        ("fr", "fr"),
        ("", ""),
    ])
    def test_normalize_tag(self, raw, expected):
        assert normalize_tag(raw) == expected

    @pytest.mark.parametrize("raw", ["german", "de-", "d", "de DE", "12-DE"])
    def test_invalid_tags_raise(self, raw):
        with pytest.raises(ValueError):
            CultureInfo(raw)

    def test_equality_by_normalized_tag(self):
        assert CultureInfo("de_de") == CultureInfo("de-DE")
        assert hash(CultureInfo("de_de")) == hash(CultureInfo("de-DE"))
        assert CultureInfo("de-DE") != CultureInfo("de-AT")

    def test_default_is_invariant(self):
        assert CultureInfo() == CultureInfo.invariant()
        assert CultureInfo().is_invariant

    def test_coerce(self):
        culture = CultureInfo("en-US")
        assert CultureInfo.coerce(culture) is culture
        assert CultureInfo.coerce("en_us") == culture
        with pytest.raises(TypeError):
            CultureInfo.coerce(42)


class TestFallbackChain:
    """Test parent cultures."""

    def test_specific_culture_chain(self):
        chain = [c.name for c in CultureInfo("de-DE").fallback_chain()]
        assert chain == ["de-DE", "de", ""]

    def test_script_culture_chain(self):
        chain = [c.name for c in CultureInfo("zh-Hant-TW").fallback_chain()]
        assert chain == ["zh-Hant-TW", "zh-Hant", "zh", ""]

    def test_invariant_is_its_own_parent(self):
        invariant = CultureInfo.invariant()
        assert invariant.parent == invariant
        assert list(invariant.fallback_chain()) == [invariant]

    def test_neutral_culture(self):
        assert CultureInfo("de").is_neutral
        assert not CultureInfo("de-DE").is_neutral
        assert not CultureInfo.invariant().is_neutral
        assert CultureInfo("de-DE").language == "de"


class TestAmbientCulture:
    """Test detection of the process UI culture."""

    def test_reads_lang(self, monkeypatch):
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        assert CultureInfo.current_ui_culture() == CultureInfo("de-DE")

    def test_language_list_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        monkeypatch.setenv("LANGUAGE", "fr_FR:en")
        assert CultureInfo.current_ui_culture() == CultureInfo("fr-FR")

    def test_strips_modifier(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "de_AT@euro")
        assert CultureInfo.current_ui_culture() == CultureInfo("de-AT")

    def test_posix_locale_is_invariant(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "C.UTF-8")
        assert CultureInfo.current_ui_culture().is_invariant

    def test_unparsable_value_is_skipped(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "not a locale")
        monkeypatch.setenv("LANG", "en_GB.UTF-8")
        assert CultureInfo.current_ui_culture() == CultureInfo("en-GB")

    def test_locale_module_fallback(self, monkeypatch):
        monkeypatch.setattr("locale.getlocale", lambda: ("pt_BR", "UTF-8"))
        assert CultureInfo.current_ui_culture() == CultureInfo("pt-BR")

    def test_nothing_known_is_invariant(self, monkeypatch):
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        assert CultureInfo.current_ui_culture().is_invariant
