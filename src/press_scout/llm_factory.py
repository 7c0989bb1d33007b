from typing import Any, Optional

from .config_validator import get_required_env

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "openrouter": "mistralai/mistral-7b-instruct",
}


def get_llm_instance(provider: str, model: Optional[str] = None, temperature: float = 0.7) -> Any:
    """
    Factory to return a ready-to-use chat model based on provider name.

    OpenRouter speaks the OpenAI API, so both providers use ChatOpenAI.

    :param provider: 'openai' or 'openrouter'
    :param model: Model name (provider default if None)
    :param temperature: Sampling temperature
    :return: langchain chat model
    :raises: ConfigurationError if the provider's API key is missing
    """
    provider = provider.lower()

    if provider == "openai":
        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for LLM (get from https://platform.openai.com/api-keys)"
        )
        extra = {}
    elif provider == "openrouter":
        api_key = get_required_env(
            "OPENROUTER_API_KEY",
            description="OpenRouter API key for LLM (get from https://openrouter.ai/keys)"
        )
        extra = {"base_url": OPENROUTER_BASE_URL}
    else:
        raise ValueError(f"Unknown LLM provider: {provider}")

    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=model or DEFAULT_MODELS[provider],
        api_key=api_key,
        temperature=temperature,
        **extra,
    )
