"""Locale-aware content resolution with default-locale fallback."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from prometheus_client import Counter

from app.content.locales import LocaleConfig
from app.content.query import ContentFilter, ContentQuery
from app.core.logging import get_logger

logger = get_logger("app.content.resolver")

LOCALE_FALLBACKS = Counter(
    "content_locale_fallbacks_total",
    "Number of lookups served from the default locale",
    ["content_type"],
)

LOCALE_MISSES = Counter(
    "content_locale_misses_total",
    "Number of lookups with no content in the requested or default locale",
    ["content_type"],
)


class ContentStoreProtocol(Protocol):
    """Queryable content store consumed by the resolver."""

    async def query(self, content_type: str, query: ContentQuery) -> Sequence[Any]: ...

    async def count(self, content_type: str, query: ContentQuery) -> int: ...


@dataclass(frozen=True)
class ResolvedItem:
    """Outcome of a single-item lookup.

    ``locale`` is the locale actually served, or ``None`` when nothing matched.
    """

    item: Any | None
    requested_locale: str
    locale: str | None
    used_fallback: bool = False

    @property
    def found(self) -> bool:
        return self.item is not None


@dataclass(frozen=True)
class ResolvedList:
    """Outcome of a list lookup."""

    items: list[Any]
    total: int
    requested_locale: str
    locale: str
    used_fallback: bool = False
    filter: ContentFilter = field(default_factory=ContentFilter)

    @property
    def total_pages(self) -> int:
        return max(1, (self.total + self.filter.page_size - 1) // self.filter.page_size)


class LocaleResolver:
    """Resolve content in the requested locale, falling back to the default.

    Each call issues its queries sequentially against the store: first with
    the requested locale, then, only if that matched nothing and the requested
    locale differs from the default, with the default locale. Nothing is
    cached between calls.

    Single items take one or two lookups. A list lookup tries each locale
    with a ``count`` (the total drives pagination) and fetches the page only
    from the locale it serves, so it makes two calls, or three when it falls
    back.
    """

    def __init__(self, store: ContentStoreProtocol, config: LocaleConfig) -> None:
        self.store = store
        self.config = config

    async def resolve(
        self,
        content_type: str,
        matcher: str | ContentFilter,
        requested_locale: str | None,
        default_locale: str | None = None,
        preview: bool = False,
    ) -> ResolvedItem | ResolvedList:
        """Resolve by slug (single item) or by filter set (list)."""
        if isinstance(matcher, ContentFilter):
            return await self.resolve_list(
                content_type, matcher, requested_locale, default_locale, preview
            )
        return await self.resolve_item(
            content_type, matcher, requested_locale, default_locale, preview
        )

    async def resolve_item(
        self,
        content_type: str,
        slug: str | None,
        requested_locale: str | None,
        default_locale: str | None = None,
        preview: bool = False,
    ) -> ResolvedItem:
        """Look up one item by slug.

        A ``None`` slug matches the first item of the locale, which serves
        singleton sections such as the company story or contact details.
        """
        requested, default = self._locales(requested_locale, default_locale)
        query = ContentQuery(
            locale=requested,
            published_only=not preview,
            slug=slug,
            filter=ContentFilter(page_size=1),
        )

        item = await self._first(content_type, query)
        if item is not None:
            return ResolvedItem(item=item, requested_locale=requested, locale=requested)

        if requested != default:
            item = await self._first(content_type, query.with_locale(default))
            if item is not None:
                LOCALE_FALLBACKS.labels(content_type=content_type).inc()
                logger.info(
                    "locale_fallback_used",
                    content_type=content_type,
                    slug=slug,
                    requested_locale=requested,
                    served_locale=default,
                )
                return ResolvedItem(
                    item=item,
                    requested_locale=requested,
                    locale=default,
                    used_fallback=True,
                )

        LOCALE_MISSES.labels(content_type=content_type).inc()
        logger.debug(
            "content_not_found",
            content_type=content_type,
            slug=slug,
            requested_locale=requested,
        )
        return ResolvedItem(item=None, requested_locale=requested, locale=None)

    async def resolve_list(
        self,
        content_type: str,
        content_filter: ContentFilter,
        requested_locale: str | None,
        default_locale: str | None = None,
        preview: bool = False,
    ) -> ResolvedList:
        """Look up a page of items matching a filter set.

        Falls back when the requested locale has no matching item at all; a
        page past the end of existing results stays an empty page in the
        requested locale.
        """
        requested, default = self._locales(requested_locale, default_locale)
        query = ContentQuery(
            locale=requested, published_only=not preview, filter=content_filter
        )

        served = requested
        total = await self.store.count(content_type, query)
        if total == 0 and requested != default:
            fallback_query = query.with_locale(default)
            fallback_total = await self.store.count(content_type, fallback_query)
            if fallback_total > 0:
                LOCALE_FALLBACKS.labels(content_type=content_type).inc()
                logger.info(
                    "locale_fallback_used",
                    content_type=content_type,
                    requested_locale=requested,
                    served_locale=default,
                    total=fallback_total,
                )
                query, served, total = fallback_query, default, fallback_total

        items: list[Any] = []
        if total > 0:
            items = list(await self.store.query(content_type, query))

        return ResolvedList(
            items=items,
            total=total,
            requested_locale=requested,
            locale=served,
            used_fallback=served != requested,
            filter=content_filter,
        )

    def _locales(
        self, requested_locale: str | None, default_locale: str | None
    ) -> tuple[str, str]:
        requested = self.config.normalize(requested_locale)
        default = (
            self.config.normalize(default_locale)
            if default_locale
            else self.config.default_locale
        )
        return requested, default

    async def _first(self, content_type: str, query: ContentQuery) -> Any | None:
        rows = await self.store.query(content_type, query)
        return rows[0] if rows else None
