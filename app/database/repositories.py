"""Repository pattern for database operations."""

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.content.localizer import locale_columns
from app.content.query import ContentQuery
from app.core.exceptions import ContentNotFoundError
from app.core.logging import get_logger

from .content_types import ContentType, get_content_type
from .models import (
    AboutBlockModel,
    AboutItemModel,
    AboutPartnerModel,
    ContactRequestModel,
    SiteSettingsModel,
    UserModel,
)

logger = get_logger("app.database.repositories")

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Base repository for common database operations."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    def _filtered(self, query: Select, filters: Optional[dict[str, Any]]) -> Select:
        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key):
                    query = query.filter(getattr(self.model, key) == value)
        return query

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """Get entity by ID."""
        return await self.session.get(self.model, id)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Sequence[Any] = (),
    ) -> Sequence[ModelType]:
        """Get all entities with optional filtering."""
        query = self._filtered(select(self.model), filters)
        if order_by:
            query = query.order_by(*order_by)

        # Apply pagination
        query = query.offset(skip).limit(limit)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """Count entities with optional filtering."""
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def create(self, **kwargs) -> ModelType:
        """Create new entity."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: Any, **kwargs) -> Optional[ModelType]:
        """Update entity by ID."""
        instance = await self.get_by_id(id)
        if instance:
            for key, value in kwargs.items():
                if hasattr(instance, key):
                    setattr(instance, key, value)
            await self.session.commit()
            await self.session.refresh(instance)
        return instance

    async def delete(self, id: Any) -> bool:
        """Delete entity by ID."""
        instance = await self.get_by_id(id)
        if instance:
            await self.session.delete(instance)
            await self.session.commit()
            return True
        return False


def _ordering(content_type: ContentType) -> list[Any]:
    clauses = []
    for name, direction in content_type.order_by:
        column = getattr(content_type.model, name)
        clauses.append(column.desc().nulls_last() if direction == "desc" else column.asc())
    return clauses


class ContentStore:
    """Queryable store over every registered per-locale content table.

    This is the store the locale resolver queries; it never decides about
    fallback itself.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _where(self, content_type: ContentType, query: ContentQuery) -> list[Any]:
        model = content_type.model
        criteria: list[Any] = []

        if query.locale is not None:
            criteria.append(model.locale == query.locale)
        if query.published_only:
            criteria.append(model.status == "published")
        if query.slug is not None and content_type.has_slug:
            criteria.append(model.slug == query.slug)

        content_filter = query.filter
        if content_filter.search and content_type.search_fields:
            pattern = f"%{content_filter.search.strip()}%"
            criteria.append(
                or_(
                    *(
                        getattr(model, name).ilike(pattern)
                        for name in content_type.search_fields
                    )
                )
            )
        if content_filter.category_id and hasattr(model, "category_id"):
            criteria.append(model.category_id == content_filter.category_id)
        if content_filter.year:
            start = datetime(content_filter.year, 1, 1)
            end = datetime(content_filter.year + 1, 1, 1)
            criteria.append(model.published_at >= start)
            criteria.append(model.published_at < end)

        for key, value in content_filter.filters.items():
            if value is None or value == "":
                continue
            if key in content_type.filter_fields:
                criteria.append(getattr(model, key) == value)
            elif key in content_type.contains_fields:
                criteria.append(getattr(model, key).ilike(f"%{value}%"))

        return criteria

    async def query(self, content_type: str, query: ContentQuery) -> Sequence[Any]:
        """Fetch one page of rows matching the query.

        Raises:
            UnknownContentTypeError: If the content type is not registered
        """
        ctype = get_content_type(content_type)
        statement = (
            select(ctype.model)
            .where(*self._where(ctype, query))
            .order_by(*_ordering(ctype))
            .offset(query.filter.offset)
            .limit(query.filter.page_size)
        )
        result = await self.session.execute(statement)
        return result.scalars().all()

    async def count(self, content_type: str, query: ContentQuery) -> int:
        """Count every row matching the query, ignoring pagination."""
        ctype = get_content_type(content_type)
        statement = (
            select(func.count()).select_from(ctype.model).where(*self._where(ctype, query))
        )
        result = await self.session.execute(statement)
        return result.scalar() or 0


class ContentRepository(BaseRepository[Any]):
    """Admin-side CRUD over one registered content type."""

    def __init__(self, session: AsyncSession, content_type: str):
        self.content_type = get_content_type(content_type)
        super().__init__(session, self.content_type.model)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Sequence[Any] = (),
    ) -> Sequence[Any]:
        """List rows in the content type's public ordering."""
        return await super().get_all(
            skip, limit, filters, order_by or _ordering(self.content_type)
        )


class AboutItemRepository(BaseRepository[AboutItemModel]):
    """Repository for multi-locale about items."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, AboutItemModel)

    def _search(self, query: Select, kind: str | None, search: str | None) -> Select:
        if kind:
            query = query.filter(self.model.kind == kind)
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            columns = locale_columns("title") + locale_columns("description")
            query = query.filter(
                or_(*(getattr(self.model, name).ilike(pattern) for name in columns))
            )
        return query

    async def search(
        self,
        kind: str | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[Sequence[AboutItemModel], int]:
        """Page of items filtered by kind and a term over every locale column.

        Returns:
            Tuple of (items, total matching count)
        """
        total_query = self._search(
            select(func.count()).select_from(self.model), kind, search
        )
        total = (await self.session.execute(total_query)).scalar() or 0

        query = self._search(select(self.model), kind, search)
        query = query.order_by(self.model.order_index.asc(), self.model.updated_at.desc())
        result = await self.session.execute(query.offset(skip).limit(limit))
        return result.scalars().all(), total

    async def published(self, kind: str | None = None) -> Sequence[AboutItemModel]:
        """Published items, optionally of one kind, in display order."""
        query = select(self.model).filter(self.model.is_published.is_(True))
        if kind:
            query = query.filter(self.model.kind == kind)
        query = query.order_by(self.model.order_index.asc(), self.model.id.asc())
        result = await self.session.execute(query)
        return result.scalars().all()

    async def reorder(self, orders: Sequence[tuple[int, int]]) -> int:
        """Apply ``(id, order_index)`` pairs in one transaction.

        Returns:
            Number of items updated; unknown ids are skipped
        """
        updated = 0
        for item_id, order_index in orders:
            instance = await self.session.get(self.model, item_id)
            if instance is None:
                logger.warning("reorder_unknown_item", item_id=item_id)
                continue
            instance.order_index = order_index
            updated += 1
        await self.session.commit()
        return updated


class SiteSettingsRepository(BaseRepository[SiteSettingsModel]):
    """Repository for the home page settings row."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, SiteSettingsModel)

    async def latest(self) -> Optional[SiteSettingsModel]:
        """Most recently updated settings row, if any."""
        query = (
            select(self.model)
            .order_by(self.model.updated_at.desc(), self.model.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def upsert(self, **values) -> SiteSettingsModel:
        """Update the latest settings row, creating it when none exists."""
        current = await self.latest()
        if current is None:
            return await self.create(**values)
        updated = await self.update(current.id, **values)
        if updated is None:
            raise ContentNotFoundError(
                f"Site settings {current.id} disappeared during update"
            )
        return updated


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserModel)

    async def get_by_email(self, email: str) -> Optional[UserModel]:
        """Get a user by e-mail, compared case-insensitively."""
        query = select(self.model).filter(
            func.lower(self.model.email) == email.strip().lower()
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()


class ContactRequestRepository(BaseRepository[ContactRequestModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ContactRequestModel)

    async def recent(self, skip: int = 0, limit: int = 50) -> Sequence[ContactRequestModel]:
        """Newest requests first."""
        return await self.get_all(
            skip, limit, order_by=(self.model.created_at.desc(),)
        )


class PartnerRepository(BaseRepository[AboutPartnerModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, AboutPartnerModel)

    async def ordered(self, published_only: bool = True) -> Sequence[AboutPartnerModel]:
        filters = {"status": "published"} if published_only else None
        return await self.get_all(
            0, 500, filters, order_by=(self.model.order.asc(), self.model.name.asc())
        )


class AboutBlockRepository(BaseRepository[AboutBlockModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, AboutBlockModel)

    async def ordered(self, published_only: bool = True) -> Sequence[AboutBlockModel]:
        filters = {"status": "published"} if published_only else None
        return await self.get_all(0, 500, filters, order_by=(self.model.block_key.asc(),))


async def clear_about_items(session: AsyncSession) -> int:
    """Remove every about item, returning the number deleted."""
    result = await session.execute(delete(AboutItemModel))
    await session.commit()
    return result.rowcount or 0
