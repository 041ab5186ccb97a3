from sqlalchemy.ext.asyncio import AsyncSession

from ai.retriever import Retriever
from db.repositories import DocumentRepository
from schemas import (
    DocumentCreateRequest,
    DocumentCreateResponse,
    DocumentResponse,
    DocumentSearchRequest,
    RetrievedDocumentResponse,
)


class DocumentUsecase:
    def __init__(
        self,
        repository: DocumentRepository | None = None,
        retriever: Retriever | None = None,
    ):
        self._document_repository = repository or DocumentRepository()
        self._retriever = retriever or Retriever(
            repository=self._document_repository
        )

    async def create_document(
        self, session: AsyncSession, data: DocumentCreateRequest
    ) -> DocumentCreateResponse:
        """Ingest a new document.

        Args:
            session: The async session.
            data: The document fields.

        Returns:
            The ID and title of the created document.

        """
        return DocumentCreateResponse.model_validate(
            await self._document_repository.insert(
                session=session,
                title=data.title,
                content=data.content,
                source=data.source,
            )
        )

    async def get_documents(self, session: AsyncSession) -> list[DocumentResponse]:
        """Get the document metadata, most recent first.

        Args:
            session: The async session.

        Returns:
            The documents without their content.

        """
        return [
            DocumentResponse.model_validate(row)
            for row in await self._document_repository.list_metadata(session=session)
        ]

    async def delete_document(self, session: AsyncSession, id: int) -> None:
        """Delete the document.

        Args:
            session: The async session.
            id: The document ID.

        """
        await self._document_repository.delete_by_id(session=session, id=id)

    async def search_documents(
        self, session: AsyncSession, data: DocumentSearchRequest
    ) -> list[RetrievedDocumentResponse]:
        """Search the corpus.

        Args:
            session: The async session.
            data: The search query and fan-out.

        Returns:
            The ranked documents with their relevance.

        """
        return [
            RetrievedDocumentResponse(
                id=item.document.id,
                title=item.document.title,
                source=item.document.source,
                created_at=item.document.created_at,
                content=item.document.content,
                relevance=item.relevance,
            )
            for item in await self._retriever.retrieve(
                session=session, query=data.query, k=data.k
            )
        ]
