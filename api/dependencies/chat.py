from typing import Annotated

from fastapi import Depends

from ai.grounding import GroundingEnforcer
from ai.retriever import Retriever
from api.dependencies.grounding import get_grounding_enforcer
from api.dependencies.retrieval import get_retriever
from usecases import ChatUsecase


def get_chat_usecase(
    enforcer: Annotated[GroundingEnforcer, Depends(get_grounding_enforcer)],
    retriever: Annotated[Retriever, Depends(get_retriever)],
) -> ChatUsecase:
    """Get the chat usecase.

    Args:
        enforcer: The grounding enforcer.
        retriever: The retrieval engine.

    Returns:
        The chat usecase.

    """
    return ChatUsecase(enforcer=enforcer, retriever=retriever)
