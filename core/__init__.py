"""Core business logic modules."""

from .bedrock_client import (
    BedrockClient,
    BedrockError,
    ModelInvocationError,
    ModelParams,
    ModelResponse,
    ResponseParseError,
)
from .config_loader import ConfigLoader
from .llm_service import LLMService
from .prompt_builder import PromptBuilder
from .techniques import TECHNIQUES, get_technique

__all__ = [
    "BedrockClient",
    "BedrockError",
    "ModelInvocationError",
    "ModelParams",
    "ModelResponse",
    "ResponseParseError",
    "ConfigLoader",
    "LLMService",
    "PromptBuilder",
    "TECHNIQUES",
    "get_technique",
]
