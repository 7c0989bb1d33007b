from typing import Any, List, Optional
from pydantic import Field, BaseModel
from langchain_core.tools import BaseTool
from ..schemas import SearchResult


class BookSearchArgs(BaseModel):
    query: str
    budget: Optional[float] = Field(
        default=None,
        description="Inclusive upper price limit, only if the user gave an exact number.",
    )
    keyword: Optional[str] = Field(
        default=None,
        description="Single edition keyword such as 'lettered', 'signed' or 'traycased'.",
    )


class BookSearchTool(BaseTool):
    """
    LangChain adapter for the RetrieverTool protocol.
    Exposes fine press book search to a tool-calling agent.
    """

    name: str = "book_search"
    description: str = (
        "Use this tool to find fine press and limited edition books for sale. "
        "Input is the collector's request in natural language, e.g. "
        "'lettered edition under $200 by Laird Barron' or 'Centipede Press horror'. "
        "Only pass budget or keyword when you want to set them explicitly; "
        "doing so disables inference of every other filter from the query."
    )
    # Pydantic v2 requires declared fields for assignment
    retriever: Any = Field(default=None)
    top_k: int = Field(default=8)

    args_schema: type[BaseModel] = BookSearchArgs

    def __init__(self, retriever, top_k: int = 8, **kwargs):
        super().__init__(**kwargs)
        self.retriever = retriever
        self.top_k = int(top_k)

    def _run(
        self,
        query: str,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
    ) -> str:
        results: List[SearchResult] = self.retriever.retrieve(
            query, k=self.top_k, budget=budget, keyword=keyword
        )

        if not results:
            return "No books found matching the request."

        return "; ".join(
            f"{r.title} by {r.author} ({r.publisher}, {r.edition_type}, {r.price_label})"
            for r in results
        )
