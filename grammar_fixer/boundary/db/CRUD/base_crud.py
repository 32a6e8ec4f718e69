"""
Base CRUD operations for SQLAlchemy models.

Provides generic create, read and update operations that can be
inherited and extended by model-specific CRUD classes. There is no
delete: rows written through this layer are kept. Reads go through
equality filters only, so model CRUD classes decide which columns
(e.g. the owner) every lookup must include.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grammar_fixer.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a new record.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_one_where(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """
        Retrieve a single record matching every equality filter.

        Args:
            session: Async database session
            **filters: Column name to required value, joined with AND

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).filter_by(**filters)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_where(self, session: AsyncSession, **filters: Any) -> Sequence[ModelT]:
        """
        Retrieve all records matching every equality filter.

        Ordered by creation time, then id, so listings are deterministic.

        Args:
            session: Async database session
            **filters: Column name to required value, joined with AND

        Returns:
            Sequence of model instances
        """
        stmt = (
            select(self.model)
            .filter_by(**filters)
            .order_by(self.model.created_at.asc(), self.model.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_instance(
        self,
        session: AsyncSession,
        instance: ModelT,
        **kwargs,
    ) -> ModelT:
        """
        Overwrite fields on a loaded record and write them back.

        Args:
            session: Async database session
            instance: Persistent model instance
            **kwargs: Fields to update with new values

        Returns:
            The same instance, refreshed from the database
        """
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance
