from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class PressScoutConfig:
    # Core paths
    catalogue_path: str

    # Vector store
    faiss_index_path: Optional[str] = None

    # Embeddings
    embedding_provider: str = "openai"
    embedding_model: Optional[str] = None

    # Search
    top_k: int = 8
    fetch_k: int = 64

    # LLM (recommendations)
    llm_provider: str = "openai"
    llm_model: Optional[str] = None
    llm_temperature: float = 0.7
    llm: Optional[Any] = None
