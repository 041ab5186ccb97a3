from dataclasses import dataclass

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from ai.scoring import KeywordPresenceScorer, Scorer, tokenize_query
from constants import DEFAULT_N_RESULTS, RECENT_FALLBACK_LIMIT
from db.models import Document
from db.repositories import DocumentRepository


@dataclass(frozen=True)
class RetrievedDocument:
    document: Document
    relevance: int


class Retriever:
    def __init__(
        self,
        repository: DocumentRepository | None = None,
        scorer: Scorer | None = None,
    ):
        self._repository = repository or DocumentRepository()
        self._scorer = scorer or KeywordPresenceScorer()

    def rank(
        self, documents: list[Document], tokens: list[str], k: int
    ) -> list[RetrievedDocument]:
        """Score documents against the keywords and keep the top k.

        Args:
            documents: The candidate documents.
            tokens: The query keywords.
            k: The maximum number of results.

        Returns:
            Matching documents by relevance, then recency.

        """
        scored = [
            RetrievedDocument(
                document=document,
                relevance=self._scorer.score(tokens=tokens, content=document.content),
            )
            for document in documents
        ]
        matches = [item for item in scored if item.relevance > 0]
        matches.sort(
            key=lambda item: (
                item.relevance,
                item.document.created_at,
                item.document.id,
            ),
            reverse=True,
        )
        return matches[:k]

    async def retrieve(
        self, session: AsyncSession, query: str, k: int = DEFAULT_N_RESULTS
    ) -> list[RetrievedDocument]:
        """Retrieve the documents most relevant to a query.

        Queries without usable keywords fall back to the most recent
        documents with zero relevance.

        Args:
            session: The async session.
            query: The query text.
            k: The maximum number of results.

        Returns:
            The ranked retrieval result.

        """
        if k <= 0:
            return []

        tokens = tokenize_query(query=query)
        if not tokens:
            recent = await self._repository.get_recent(
                session=session, limit=min(k, RECENT_FALLBACK_LIMIT)
            )
            logfire.info("Recency fallback retrieval", n_results=len(recent))
            return [
                RetrievedDocument(document=document, relevance=0) for document in recent
            ]

        results = self.rank(
            documents=await self._repository.scan_all(session=session),
            tokens=tokens,
            k=k,
        )
        logfire.info("Keyword retrieval", tokens=tokens, n_results=len(results))
        return results
