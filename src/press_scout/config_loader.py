"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import PressScoutConfig
from .config_validator import (
    get_float_env,
    get_optional_env,
    get_positive_int_env,
    validate_choice,
    validate_path,
)

EMBEDDING_PROVIDERS = ("openai", "huggingface")
LLM_PROVIDERS = ("openai", "openrouter")


def load_config_from_env(use_dotenv: bool = True) -> PressScoutConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = PressScoutApp(config)
        app.initialize()

    :param use_dotenv: Load a .env file first (local development)
    :return: Validated PressScoutConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    if use_dotenv:
        load_dotenv()

    config = PressScoutConfig(
        catalogue_path=get_optional_env("CATALOGUE_PATH", default="data/books.json"),
        faiss_index_path=get_optional_env("VECTOR_STORE_PATH"),
        embedding_provider=validate_choice(
            get_optional_env("EMBEDDING_PROVIDER", default="openai"),
            EMBEDDING_PROVIDERS,
            "EMBEDDING_PROVIDER",
        ),
        embedding_model=get_optional_env("EMBEDDING_MODEL"),
        top_k=get_positive_int_env("SEARCH_TOP_K", 8),
        fetch_k=get_positive_int_env("SEARCH_FETCH_K", 64),
        llm_provider=validate_choice(
            get_optional_env("LLM_PROVIDER", default="openai"),
            LLM_PROVIDERS,
            "LLM_PROVIDER",
        ),
        llm_model=get_optional_env("LLM_MODEL"),
        llm_temperature=get_float_env("LLM_TEMPERATURE", 0.7, minimum=0.0, maximum=2.0),
    )

    validate_path(config.catalogue_path, "CATALOGUE_PATH")

    return config
