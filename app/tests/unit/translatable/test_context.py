"""Tests for translatable.context module."""

import dataclasses

import pytest

from tests.factories.translations import make_group, make_leaf, make_translator
from translatable.context import context_path, translation_context
from translatable.errors import InvalidLanguage, LanguageNotAvailable, PathNotFound
from translatable.languages import Language
from translatable.operations import TranslationStatus


@pytest.fixture
def checkout_translator():
    """Translator over a checkout section with one English-only entry."""
    return make_translator(
        make_group(
            checkout=make_group(
                title=make_leaf(en="Checkout", es="Pagar"),
                note=make_leaf(en="Prices include tax"),
                buttons=make_group(
                    pay=make_leaf(en="Pay {total}", es="Pagar {total}"),
                ),
            )
        )
    )


class TestTranslationContextWithFallback:
    """Contexts declaring a fallback language."""

    @pytest.fixture
    def checkout_text(self, checkout_translator):
        @translation_context(
            "checkout", fallback_language="en", translator=checkout_translator
        )
        class CheckoutText:
            title: str
            note: str
            pay_button: str = context_path("buttons.pay")

        return CheckoutText

    def test_loads_requested_language(self, checkout_text):
        """Fields are filled from the requested language and rendered."""
        text = checkout_text.load_translations("es", {"total": "12.00"})

        assert text.title == "Pagar"
        assert text.pay_button == "Pagar 12.00"

    def test_falls_back_per_field(self, checkout_text):
        """Fields missing in the requested language use the fallback."""
        text = checkout_text.load_translations(Language.ES)
        assert text.note == "Prices include tax"

    def test_unavailable_language_uses_fallback(self, checkout_text):
        text = checkout_text.load_translations("fr", {"total": "5"})

        assert text.title == "Checkout"
        assert text.pay_button == "Pay 5"

    def test_invalid_language_uses_fallback(self, checkout_text):
        """An invalid runtime language still produces a context."""
        text = checkout_text.load_translations("xx")
        assert text.title == "Checkout"

    def test_instances_are_frozen(self, checkout_text):
        text = checkout_text.load_translations("en")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.title = "changed"

    def test_exposes_paths_and_fallback(self, checkout_text):
        assert checkout_text.translation_paths["pay_button"] == (
            "checkout",
            "buttons",
            "pay",
        )
        assert checkout_text.fallback_language is Language.EN


class TestTranslationContextWithoutFallback:
    """Contexts without a fallback return TranslationResult."""

    def test_success_wraps_instance(self, checkout_translator):
        @translation_context("checkout", translator=checkout_translator)
        class Titles:
            title: str

        result = Titles.load_translations("es")

        assert result.is_success
        assert result.value.title == "Pagar"

    def test_missing_language_is_a_result(self, checkout_translator):
        @translation_context("checkout", translator=checkout_translator)
        class Notes:
            title: str
            note: str

        result = Notes.load_translations("es")

        assert result.status == TranslationStatus.LANGUAGE_NOT_AVAILABLE
        assert result.error.path == ("checkout", "note")

    def test_invalid_language_is_a_result(self, checkout_translator):
        @translation_context("checkout", translator=checkout_translator)
        class Titles:
            title: str

        result = Titles.load_translations("xx")
        assert result.status == TranslationStatus.INVALID_LANGUAGE


class TestTranslationContextDeclarationChecks:
    """Ahead-of-time checks performed when the class is decorated."""

    def test_non_string_field_rejected(self, checkout_translator):
        with pytest.raises(TypeError):

            @translation_context("checkout", translator=checkout_translator)
            class Broken:
                title: int

    def test_missing_path_rejected(self, checkout_translator):
        with pytest.raises(PathNotFound):

            @translation_context("checkout", translator=checkout_translator)
            class Broken:
                subtitle: str

    def test_invalid_fallback_rejected(self, checkout_translator):
        with pytest.raises(InvalidLanguage):

            @translation_context(
                "checkout", fallback_language="xx", translator=checkout_translator
            )
            class Broken:
                title: str

    def test_fallback_must_cover_every_field(self, checkout_translator):
        with pytest.raises(LanguageNotAvailable) as exc_info:

            @translation_context(
                "checkout", fallback_language="es", translator=checkout_translator
            )
            class Broken:
                title: str
                note: str

        assert exc_info.value.path == ("checkout", "note")

    def test_default_translator_from_settings(self, translations_dir, monkeypatch):
        """Without an explicit translator the configured tree is used."""
        monkeypatch.setenv("LOCALES_PATH", str(translations_dir))

        @translation_context(fallback_language="en")
        class Common:
            greeting: str
            farewell: str

        text = Common.load_translations("es", {"name": "Lu"})

        assert text.greeting == "¡Hola Lu!"
        assert text.farewell == "Goodbye"
