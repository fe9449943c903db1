"""Tests for locale configuration."""

import pytest

from app.content.locales import LocaleConfig


def test_normalize_keeps_supported_locale() -> None:
    assert LocaleConfig().normalize("kk") == "kk"


@pytest.mark.parametrize("tag", ["ru-RU", "RU", "ru_ru", " ru "])
def test_normalize_strips_region_and_case(tag: str) -> None:
    assert LocaleConfig().normalize(tag) == "ru"


@pytest.mark.parametrize("tag", [None, "", "de", "zz-ZZ"])
def test_normalize_unknown_to_default(tag: str | None) -> None:
    assert LocaleConfig(default_locale="ru").normalize(tag) == "ru"


def test_default_must_be_supported() -> None:
    with pytest.raises(ValueError, match="not a supported locale"):
        LocaleConfig(default_locale="de")


def test_preference_order_has_no_duplicates() -> None:
    assert LocaleConfig().preference_order("en") == ["en", "ru", "kk"]
    assert LocaleConfig().preference_order("kk", "ru") == ["kk", "ru", "en"]
