from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db, document
from schemas import (
    DocumentCreateRequest,
    DocumentCreateResponse,
    DocumentResponse,
    DocumentSearchRequest,
    RetrievedDocumentResponse,
)

router = APIRouter(prefix="/document", tags=["Document"])


@router.post(path="")
async def create_document(
    data: Annotated[DocumentCreateRequest, Body(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        document.DocumentUsecase, Depends(dependency=document.get_document_usecase)
    ],
) -> DocumentCreateResponse:
    return await usecase.create_document(session=session, data=data)


@router.get(path="/list")
async def get_documents(
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        document.DocumentUsecase, Depends(dependency=document.get_document_usecase)
    ],
) -> list[DocumentResponse]:
    return await usecase.get_documents(session=session)


@router.post(path="/search")
async def search_documents(
    data: Annotated[DocumentSearchRequest, Body(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        document.DocumentUsecase, Depends(dependency=document.get_document_usecase)
    ],
) -> list[RetrievedDocumentResponse]:
    return await usecase.search_documents(session=session, data=data)


@router.delete(path="/{id}")
async def delete_document(
    id: Annotated[int, Path(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        document.DocumentUsecase, Depends(dependency=document.get_document_usecase)
    ],
) -> JSONResponse:
    await usecase.delete_document(session=session, id=id)
    return JSONResponse(
        content={"success": True, "detail": "Document deleted successfully"},
        status_code=status.HTTP_202_ACCEPTED,
    )
