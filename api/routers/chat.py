from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import chat, db
from schemas import ChatRequest, ChatResponse

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post(path="")
async def answer(
    data: Annotated[ChatRequest, Body(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[chat.ChatUsecase, Depends(dependency=chat.get_chat_usecase)],
) -> ChatResponse:
    return await usecase.answer(session=session, data=data)
