from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from ai.context import assemble_context
from ai.grounding import GroundingEnforcer
from ai.retriever import Retriever
from enums import Role
from exceptions import QueryValidationError
from schemas import ChatRequest, ChatResponse, ChatTurn, SourceReference


class ChatUsecase:
    def __init__(
        self,
        enforcer: GroundingEnforcer | None = None,
        retriever: Retriever | None = None,
    ):
        self._enforcer = enforcer or GroundingEnforcer()
        self._retriever = retriever or Retriever()

    async def answer(self, session: AsyncSession, data: ChatRequest) -> ChatResponse:
        """Answer one conversation turn.

        Retrieval, context assembly and the model call run in sequence. The
        history is owned by the caller and returned extended with this turn.

        Args:
            session: The async session.
            data: The chat request.

        Returns:
            The assistant turn.

        """
        if not data.message.strip() and data.image is None:
            raise QueryValidationError

        results = await self._retriever.retrieve(session=session, query=data.message)

        answer = await self._enforcer.answer(
            query_text=data.message,
            context=assemble_context(results=results),
            mode=data.mode,
            image=data.image.to_payload() if data.image else None,
        )

        return ChatResponse(
            timestamp=datetime.now(),
            content=answer.text,
            errored=answer.errored,
            outcome=answer.outcome,
            mode=data.mode,
            sources=[
                SourceReference(
                    id=item.document.id,
                    title=item.document.title,
                    relevance=item.relevance,
                )
                for item in results
            ],
            history=[
                *data.history,
                ChatTurn(role=Role.USER, content=data.message),
                ChatTurn(
                    role=Role.ASSISTANT, content=answer.text, errored=answer.errored
                ),
            ],
        )
