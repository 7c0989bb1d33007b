from .retriever_tool import RetrieverTool
from .book_retriever import BookRetriever
from .impl import BookSearchTool

__all__ = [
    "RetrieverTool",
    "BookRetriever",
    "BookSearchTool",
]
