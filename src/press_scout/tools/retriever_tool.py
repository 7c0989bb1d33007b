from typing import List, Optional, Protocol
from ..schemas import SearchResult


class RetrieverTool(Protocol):
    """Protocol for a book retrieval tool used by the agent."""
    def retrieve(
        self,
        query: str,
        k: Optional[int] = None,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
    ) -> List[SearchResult]:
        ...
