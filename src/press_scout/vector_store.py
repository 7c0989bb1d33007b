import logging
from typing import List, Sequence, Tuple

from langchain_core.documents import Document
from langchain_community.vectorstores import FAISS

from .filter_translator import to_metadata_predicate
from .query.types import FilterCondition

logger = logging.getLogger(__name__)


class BookVectorStore:
    def __init__(self, embedding_model, index_path: str):
        self._embedding_model = embedding_model
        self._index_path = index_path
        self._vectorstore: FAISS | None = None

    def build(self, documents: List[Document]) -> None:
        if not documents:
            raise ValueError("Cannot build vector store with empty documents.")
        self._vectorstore = FAISS.from_documents(
            documents=documents,
            embedding=self._embedding_model
            )
        self._vectorstore.save_local(self._index_path)
        logger.info(f"Built FAISS index with {len(documents)} books at {self._index_path}")

    def load(self) -> None:
        self._vectorstore = FAISS.load_local(
            self._index_path,
            self._embedding_model,
            allow_dangerous_deserialization=True
        )
        logger.info(f"Loaded FAISS index from {self._index_path}")

    def is_initialized(self) -> bool:
        return self._vectorstore is not None

    def search(
        self,
        text: str,
        k: int,
        conditions: Sequence[FilterCondition] = (),
        fetch_k: int = 64,
    ) -> List[Tuple[Document, float]]:
        """
        Filtered similarity search.

        :param text: Text to embed for the query vector
        :param k: Maximum number of hits
        :param conditions: Conjunctive filter conditions on document metadata
        :param fetch_k: Candidates fetched before filtering
        :return: (document, relevance score) pairs, best first
        """
        if not self._vectorstore:
            raise RuntimeError("Vector store not initialized.")
        hits = self._vectorstore.similarity_search_with_relevance_scores(
            text,
            k=k,
            filter=to_metadata_predicate(conditions) if conditions else None,
            fetch_k=max(fetch_k, k),
        )
        # FAISS scores are numpy floats
        return [(doc, float(score)) for doc, score in hits]
