from typing import Any, Generic, Type, TypeVar

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

Model = TypeVar("Model", bound=object)


class BaseRepository(Generic[Model]):
    def __init__(self, model: Type[Model]):
        self.model = model

    async def create(self, session: AsyncSession, data: dict[str, Any]) -> Model:
        """Create a new model instance.

        Args:
            session: The async session.
            data: The data to create the model instance.

        Returns:
            The created model instance.

        """
        instance = self.model(**data)

        session.add(instance=instance)
        await session.commit()
        await session.refresh(instance)

        return instance

    async def get_all(
        self,
        session: AsyncSession,
        order_by: list[ColumnElement[Any]] | None = None,
        limit: int | None = None,
        **filters,
    ) -> list[Model]:
        """Get all model instances with sorting and an optional limit.

        Args:
            session: The async session.
            order_by: The ordering clauses.
            limit: The maximum number of instances to return.
            **filters: The filters to apply to the query.

        Returns:
            The list of model instances.

        """
        statement = select(self.model).filter_by(**filters)
        if order_by:
            statement = statement.order_by(*order_by)
        if limit is not None:
            statement = statement.limit(limit)

        result = await session.execute(statement=statement)

        return list(result.scalars().all())

    async def get_by(self, session: AsyncSession, **filters) -> Model | None:
        """Get a model instance by filters.

        Args:
            session: The async session.
            **filters: The filters to apply to the query.

        Returns:
            The model instance.

        """
        result = await session.execute(
            statement=select(self.model).filter_by(**filters)
        )
        return result.scalar_one_or_none()

    async def delete_by(self, session: AsyncSession, **filters) -> bool:
        """Delete a model instance by filters.

        Args:
            session: The async session.
            **filters: The filters to apply to the query.

        Returns:
            True if the model instance was deleted, False otherwise.

        """
        result = await session.execute(
            statement=delete(self.model).filter_by(**filters)
        )
        await session.commit()

        return bool(result.rowcount)
