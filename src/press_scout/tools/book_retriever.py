import logging
from typing import List, Optional, Tuple

from langchain_core.documents import Document

from .retriever_tool import RetrieverTool  # protocol
from ..query import QueryResolver, ResolvedQuery
from ..schemas import SearchResult
from ..vector_store import BookVectorStore

logger = logging.getLogger(__name__)


class BookRetriever(RetrieverTool):
    """
    Retrieval layer for fine press book search.

    Resolves the query into filter conditions and embedding text, then runs a
    filtered similarity search. Implements RetrieverTool protocol directly.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        vector_store: BookVectorStore,
        k: int = 8,
        resolver: Optional[QueryResolver] = None,
        fetch_k: int = 64,
    ):
        """
        :param vector_store: BookVectorStore instance (must be initialized)
        :param k: Default number of results to return
        :param resolver: QueryResolver (a default one is created if None)
        :param fetch_k: Candidates fetched before metadata filtering
        """
        if not vector_store.is_initialized():
            raise RuntimeError(
                "BookVectorStore must be initialized (call build() or load()) "
                "before creating BookRetriever"
            )
        self._vector_store = vector_store
        self._default_k = k
        self._fetch_k = fetch_k
        self._resolver = resolver or QueryResolver()

    def search(
        self,
        query: str,
        k: Optional[int] = None,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
    ) -> Tuple[List[SearchResult], ResolvedQuery]:
        """
        Resolve and run one request.

        Passing budget or keyword selects the explicit-parameters path;
        otherwise filters are inferred from the query text.

        :return: (results, resolution) for this request only
        """
        k = k or self._default_k

        resolution = self._resolver.resolve(query, budget=budget, keyword=keyword)

        hits = self._vector_store.search(
            resolution.embedding_text,
            k=k,
            conditions=resolution.conditions,
            fetch_k=self._fetch_k,
        )
        logger.debug(
            f"{resolution.path.value} search for '{query}': "
            f"{len(resolution.conditions)} conditions, {len(hits)} hits"
        )
        return [self._to_result(doc, score) for doc, score in hits], resolution

    def retrieve(
        self,
        query: str,
        k: Optional[int] = None,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
    ) -> List[SearchResult]:
        """Retrieve top-k books matching the query."""
        results, _ = self.search(query, k=k, budget=budget, keyword=keyword)
        return results

    @staticmethod
    def _to_result(doc: Document, score: float) -> SearchResult:
        meta = doc.metadata
        price = meta.get("price") or 0
        return SearchResult(
            id=str(meta.get("id", "")),
            title=meta.get("title", ""),
            author=meta.get("author") or "Unknown",
            publisher=meta.get("publisher", ""),
            edition_type=meta.get("edition_type", "Standard"),
            availability=meta.get("availability", ""),
            url=meta.get("url", ""),
            similarity=float(score),
            # 0 is an unknown price, not a free book
            price=float(price) if price > 0 else None,
            currency=meta.get("currency"),
            image_url=meta.get("image_url"),
            genre_tags=list(meta.get("genre_tags") or []),
        )
