"""
Public application facade for Fine Press Scout.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
import os
from pathlib import Path
from time import time
from typing import Optional

from .agent.prompts import (
    UNAVAILABLE_CONTEXT,
    build_context_block,
    build_recommendation_messages,
    build_scout_prompt,
)
from .config import PressScoutConfig
from .exceptions import RetrieverNotInitializedError
from .llm_factory import get_llm_instance
from .query import QueryResolver
from .retriever_factory import create_retriever
from .schemas import RecommendationResponse, SearchResponse
from .tools.book_retriever import BookRetriever
from .vector_store import BookVectorStore

logger = logging.getLogger(__name__)


class PressScoutApp:
    """
    Public application facade for Fine Press Scout.

    Usage:
        config = PressScoutConfig(catalogue_path="data/books.json")
        app = PressScoutApp(config)
        app.initialize()
        response = app.search("lettered edition under $200 by Laird Barron")
        answer = app.recommend("something Lovecraftian under $150")

    Safe to share between threads once initialized: every call carries its
    own resolution from the retriever.
    """

    def __init__(
        self,
        config: PressScoutConfig,
        embedding_model=None,
        vector_store: Optional[BookVectorStore] = None,
    ):
        """
        :param config: PressScoutConfig instance (config.llm may hold a chat model)
        :param embedding_model: Optional embedding model (created from config if None)
        :param vector_store: Optional pre-initialized vector store
        """
        self._config = config
        self._embedding_model = embedding_model
        self._vector_store = vector_store
        self._retriever: Optional[BookRetriever] = None

    def initialize(self) -> None:
        """
        Wire the retriever: resolve paths, build or load the index.

        Call this once before using search() or recommend().
        The chat model is created on the first recommend() call, so a
        search-only deployment needs no LLM credentials.
        """
        if self._retriever:
            return

        if self._vector_store is None:
            base_dir = Path.cwd()
            if not os.path.isabs(self._config.catalogue_path):
                self._config.catalogue_path = str(base_dir / self._config.catalogue_path)
            if not self._config.faiss_index_path:
                self._config.faiss_index_path = str(base_dir / "book_vectorstore")

        self._retriever = create_retriever(
            config=self._config,
            embedding_model=self._embedding_model,
            vector_store=self._vector_store,
            resolver=QueryResolver(),
        )

    def search(
        self,
        query: str,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
        top_k: Optional[int] = None,
    ) -> SearchResponse:
        """
        Search the catalogue.

        :param query: Free-text collector request
        :param budget: Explicit inclusive price ceiling
        :param keyword: Explicit edition keyword
        :param top_k: Number of results (config default if None)
        :return: SearchResponse with results and what was understood
        """
        retriever = self._require_retriever()

        start_time = time()
        results, resolution = retriever.search(query, k=top_k, budget=budget, keyword=keyword)

        return SearchResponse(
            results=results,
            analysis=resolution.analysis,
            resolution_path=resolution.path,
            embedding_text=resolution.embedding_text,
            latency_ms=int((time() - start_time) * 1000),
        )

    def recommend(
        self,
        query: str,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
        top_k: Optional[int] = None,
    ) -> RecommendationResponse:
        """
        Retrieve matching titles and ask the LLM for a recommendation.

        If the search backend fails, the LLM is still called with a context
        saying search is temporarily unavailable.

        :param query: The collector's message
        :param budget: Explicit inclusive price ceiling
        :param keyword: Explicit edition keyword
        :param top_k: Number of titles given to the LLM (config default if None)
        :return: RecommendationResponse with the answer and the titles it saw
        """
        retriever = self._require_retriever()
        start_time = time()

        results = []
        resolution = None
        try:
            results, resolution = retriever.search(query, k=top_k, budget=budget, keyword=keyword)
            context = build_context_block(results)
        except Exception as e:
            logger.error(f"Book search failed for '{query}': {e}", exc_info=True)
            context = UNAVAILABLE_CONTEXT

        llm = self._get_llm()
        llm_start = time()
        message = llm.invoke(build_recommendation_messages(query, context))
        llm_latency_ms = int((time() - llm_start) * 1000)

        return RecommendationResponse(
            recommendation=message.content,
            results=results,
            analysis=resolution.analysis if resolution else None,
            resolution_path=resolution.path if resolution else None,
            retrieval_failed=resolution is None,
            latency_ms=int((time() - start_time) * 1000),
            llm_latency_ms=llm_latency_ms,
        )

    def build_prompt(self, query: str, response: SearchResponse) -> str:
        """Render the LLM context for a completed search."""
        return build_scout_prompt(query, response.analysis, response.results)

    def _require_retriever(self) -> BookRetriever:
        if not self._retriever:
            raise RetrieverNotInitializedError("Call initialize() before searching.")
        return self._retriever

    def _get_llm(self):
        if self._config.llm is None:
            self._config.llm = get_llm_instance(
                provider=self._config.llm_provider,
                model=self._config.llm_model,
                temperature=self._config.llm_temperature,
            )
        return self._config.llm
