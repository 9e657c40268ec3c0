import os
from dataclasses import dataclass
from typing import Optional
from .constants import *
from ...exceptions import RemoteServiceError


@dataclass(frozen=True)
class AIConfig:
    """
    Settings for an OpenAI-compatible chat completions endpoint.

    Attributes:
        api_key: bearer token for the service
        base_url: endpoint root, defaults to the OpenAI API
        model: model identifier
        temperature: sampling temperature
        timeout: request timeout in seconds
    """
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None) -> "AIConfig":
        """
        Build a config from OPENAI_API_KEY, OPENAI_BASE_URL and OPENAI_MODEL.

        Raises:
            RemoteServiceError: no API key given or set in the environment
        """
        api_key = api_key or os.getenv(ENV_API_KEY)
        if not api_key:
            raise RemoteServiceError(
                f"API key is not set; pass one or export {ENV_API_KEY}")
        return cls(
            api_key=api_key,
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            model=os.getenv(ENV_MODEL) or DEFAULT_MODEL)
