from typing import Any, Sequence

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from constants import DEFAULT_SOURCE
from db.models import Document
from db.repositories.base import BaseRepository
from exceptions import DocumentValidationError


class DocumentRepository(BaseRepository[Document]):
    """Durable corpus of ingested documents.

    There is no update operation: documents are inserted, listed, scanned and
    deleted. Every method commits or reads through the given session, so reads
    observe all prior commits.
    """

    def __init__(self):
        super().__init__(model=Document)

    @property
    def recency_order(self) -> list[Any]:
        return [Document.created_at.desc(), Document.id.desc()]

    async def insert(
        self,
        session: AsyncSession,
        title: str | None,
        content: str | None,
        source: str | None = None,
    ) -> Document:
        """Insert a document.

        Args:
            session: The async session.
            title: The document title.
            content: The document body.
            source: The provenance label, defaults to "Uploaded File".

        Returns:
            The stored document.

        Raises:
            DocumentValidationError: If the title or content is empty.

        """
        if not title or not title.strip() or not content or not content.strip():
            raise DocumentValidationError

        return await self.create(
            session=session,
            data={
                "title": title,
                "content": content,
                "source": source or DEFAULT_SOURCE,
            },
        )

    async def list_metadata(self, session: AsyncSession) -> Sequence[Row[Any]]:
        """List document metadata, most recent first.

        Args:
            session: The async session.

        Returns:
            Rows of id, title, source and created_at.

        """
        result = await session.execute(
            statement=select(
                Document.id, Document.title, Document.source, Document.created_at
            ).order_by(*self.recency_order)
        )
        return result.all()

    async def delete_by_id(self, session: AsyncSession, id: int) -> None:
        """Delete a document; missing ids are ignored.

        Args:
            session: The async session.
            id: The document ID.

        """
        await self.delete_by(session=session, id=id)

    async def scan_all(self, session: AsyncSession) -> list[Document]:
        return await self.get_all(session=session, order_by=self.recency_order)

    async def get_recent(self, session: AsyncSession, limit: int) -> list[Document]:
        return await self.get_all(
            session=session, order_by=self.recency_order, limit=limit
        )
