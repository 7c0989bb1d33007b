from dataclasses import dataclass, field
from typing import List, Optional

from .query import QueryAnalysis, ResolutionPath


@dataclass
class SearchResult:
    id: str
    title: str
    author: str
    publisher: str
    edition_type: str
    availability: str
    url: str
    similarity: float
    # None when the catalogue price is 0 (unknown)
    price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None
    genre_tags: List[str] = field(default_factory=list)

    @property
    def price_label(self) -> str:
        if self.price is None:
            return "price on request"
        symbol = {"GBP": "£", "EUR": "€"}.get((self.currency or "").upper(), "$")
        return f"{symbol}{self.price:.2f}"


@dataclass
class SearchResponse:
    results: List[SearchResult]
    analysis: QueryAnalysis
    resolution_path: ResolutionPath
    embedding_text: str
    latency_ms: Optional[int] = None


@dataclass
class RecommendationResponse:
    recommendation: str
    results: List[SearchResult]
    # None when retrieval failed
    analysis: Optional[QueryAnalysis] = None
    resolution_path: Optional[ResolutionPath] = None
    retrieval_failed: bool = False
    latency_ms: Optional[int] = None
    llm_latency_ms: Optional[int] = None
