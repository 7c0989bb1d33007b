import os
from typing import Optional
from .tools.book_retriever import BookRetriever
from .vector_store import BookVectorStore
from .data_loader import BookDataLoader
from .canonicalizer import build_documents
from .config import PressScoutConfig
from .query import QueryResolver

DEFAULT_HUGGINGFACE_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


def create_embedding_model(config: Optional[PressScoutConfig] = None):
    """
    Create the embedding model named by config (or EMBEDDING_PROVIDER).

    Provider packages are imported lazily so only the configured one is needed.
    """
    provider = (
        config.embedding_provider if config else os.getenv("EMBEDDING_PROVIDER", "openai")
    ).lower()
    model_name = config.embedding_model if config else os.getenv("EMBEDDING_MODEL")

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings
        from .config_validator import get_required_env
        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for embeddings (get from https://platform.openai.com/api-keys)"
        )
        kwargs = {"api_key": api_key}
        if model_name:
            kwargs["model"] = model_name
        return OpenAIEmbeddings(**kwargs)
    elif provider == "huggingface":
        from langchain_community.embeddings import HuggingFaceEmbeddings
        return HuggingFaceEmbeddings(model_name=model_name or DEFAULT_HUGGINGFACE_MODEL)
    else:
        raise ValueError(f"Unknown embedding provider: {provider}")


def create_retriever(
    config: Optional[PressScoutConfig] = None,
    embedding_model=None,
    vector_store: Optional[BookVectorStore] = None,
    resolver: Optional[QueryResolver] = None,
) -> BookRetriever:
    """
    Factory function to create a configured BookRetriever instance.

    Handles:
    - Embedding model creation
    - Vector store initialization
    - Index building from the catalogue if needed

    :param config: PressScoutConfig instance
    :param embedding_model: Embedding model instance (created from config if None)
    :param vector_store: Pre-initialized BookVectorStore (optional)
    :param resolver: QueryResolver (default created by the retriever if None)
    :return: Configured BookRetriever instance
    """
    if vector_store is None:
        if embedding_model is None:
            embedding_model = create_embedding_model(config)

        index_path = config.faiss_index_path if config else os.getenv(
            "VECTOR_STORE_PATH",
            "book_vectorstore"
        )
        if not index_path:
            raise ValueError(
                "FAISS index path must be provided via config.faiss_index_path "
                "or VECTOR_STORE_PATH env var"
            )

        vector_store = BookVectorStore(
            embedding_model=embedding_model,
            index_path=index_path
        )

        if not os.path.exists(index_path):
            if config is None or not config.catalogue_path:
                raise ValueError(
                    "Cannot build index: catalogue_path not provided in config"
                )
            books = BookDataLoader(config.catalogue_path).load_books()
            vector_store.build(build_documents(books))
        else:
            vector_store.load()

    k = config.top_k if config else 8
    fetch_k = config.fetch_k if config else 64
    return BookRetriever(vector_store=vector_store, k=k, resolver=resolver, fetch_k=fetch_k)
