"""Locale configuration shared by the resolver and the field localizer."""

from dataclasses import dataclass, field

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ru", "kk")


@dataclass(frozen=True)
class LocaleConfig:
    """Immutable locale settings.

    Attributes:
        default_locale: Locale served when the requested one has no content
        locales: Recognized locales, in the preference order used when scanning
            sibling locale columns for a non-empty value
    """

    default_locale: str = DEFAULT_LOCALE
    locales: tuple[str, ...] = field(default=SUPPORTED_LOCALES)

    def __post_init__(self) -> None:
        if not self.locales:
            raise ValueError("At least one locale must be configured")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale '{self.default_locale}' is not a supported locale"
            )

    def is_supported(self, locale: str | None) -> bool:
        """Check whether a locale tag is recognized."""
        return bool(locale) and locale.lower() in self.locales

    def normalize(self, locale: str | None) -> str:
        """Map a requested locale tag onto a supported one.

        Region suffixes are dropped (``ru-RU`` -> ``ru``); anything
        unrecognized resolves to the default locale.
        """
        if not locale:
            return self.default_locale
        tag = locale.strip().lower().replace("_", "-").split("-", 1)[0]
        return tag if tag in self.locales else self.default_locale

    def preference_order(self, requested: str, default: str | None = None) -> list[str]:
        """Locales to try, most preferred first, without duplicates."""
        order = [requested, default or self.default_locale, *self.locales]
        return list(dict.fromkeys(order))
