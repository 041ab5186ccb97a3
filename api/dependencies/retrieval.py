from ai.retriever import Retriever
from db.repositories import DocumentRepository


def get_document_repository() -> DocumentRepository:
    """Get the document store.

    Returns:
        The document repository.

    """
    return DocumentRepository()


def get_retriever() -> Retriever:
    """Get the retrieval engine over the document store.

    Returns:
        The retriever.

    """
    return Retriever(repository=get_document_repository())
