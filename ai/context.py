from typing import Sequence

from ai.retriever import RetrievedDocument
from constants import DOCUMENT_LABEL, NO_DOCUMENTS_CONTEXT


def assemble_context(results: Sequence[RetrievedDocument]) -> str:
    """Format retrieved documents into one labeled context block.

    Args:
        results: The ranked retrieval result.

    Returns:
        The context block, or the no-documents sentinel when nothing was retrieved.

    """
    if not results:
        return NO_DOCUMENTS_CONTEXT

    return "\n\n".join(
        f"[{DOCUMENT_LABEL} {rank}: {item.document.title}]\n{item.document.content}"
        for rank, item in enumerate(results, start=1)
    )
