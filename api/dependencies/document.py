from typing import Annotated

from fastapi import Depends

from ai.retriever import Retriever
from api.dependencies.retrieval import get_document_repository, get_retriever
from db.repositories import DocumentRepository
from usecases import DocumentUsecase


def get_document_usecase(
    repository: Annotated[DocumentRepository, Depends(get_document_repository)],
    retriever: Annotated[Retriever, Depends(get_retriever)],
) -> DocumentUsecase:
    """Get the document usecase.

    Args:
        repository: The document store.
        retriever: The retrieval engine.

    Returns:
        The document usecase.

    """
    return DocumentUsecase(repository=repository, retriever=retriever)
