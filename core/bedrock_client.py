"""
Client for the AWS Bedrock runtime.

This module contains:
- Model parameter and response records
- Request body construction for Claude text-completion models
- A thin wrapper around boto3's bedrock-runtime InvokeModel call
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class BedrockError(Exception):
    """Base error for Bedrock calls."""


class ModelInvocationError(BedrockError):
    """Transport or service failure while invoking the model."""


class ResponseParseError(BedrockError):
    """Model returned a body that is not a JSON object."""


@dataclass
class ModelParams:
    """Inference parameters sent with every request."""

    model_id: str  # e.g. anthropic.claude-v2:1
    temperature: float = 0.7  # creativity of the output (0.0 to 1.0)
    top_p: float = 1.0  # nucleus sampling mass (0.0 to 1.0)
    top_k: int = 500  # number of candidate tokens considered
    max_tokens: int = 500  # maximum number of tokens to generate

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ModelResponse:
    """Decoded Claude text-completion response."""

    completion: str = ""
    stop_reason: str = ""
    type: str = ""
    stop: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelResponse":
        return cls(
            completion=data.get("completion") or "",
            stop_reason=data.get("stop_reason") or "",
            type=data.get("type") or "",
            stop=data.get("stop") or "",
        )


def default_claude_params() -> ModelParams:
    """Default parameters for Claude v2 models; model id comes from MODEL_ID."""
    return ModelParams(model_id=os.getenv("MODEL_ID", ""))


def build_request_body(prompt: str, params: ModelParams) -> Dict[str, Any]:
    """
    Build the InvokeModel body for a Claude text-completion model.

    Args:
        prompt: Prompt already in "\\n\\nHuman: ...\\n\\nAssistant:" form
        params: Inference parameters

    Returns:
        Request body as a dict, ready for json.dumps
    """
    return {
        "prompt": prompt,
        "temperature": params.temperature,
        "top_p": params.top_p,
        "top_k": params.top_k,
        "max_tokens_to_sample": params.max_tokens,
    }


def parse_response_body(raw: bytes) -> ModelResponse:
    """Decode a raw InvokeModel response body."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"failed to parse response: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f"failed to parse response: expected a JSON object, got {type(data).__name__}"
        )

    return ModelResponse.from_dict(data)


class BedrockClient:
    """Client for Bedrock InvokeModel using boto3."""

    def __init__(self, region: Optional[str] = None, client=None):
        """
        Initialize Bedrock client.

        Args:
            region: AWS region (defaults to AWS_REGION, then the boto3 chain)
            client: Pre-built bedrock-runtime client (mainly for tests)
        """
        self.region = region or os.getenv("AWS_REGION")
        self.client = client or boto3.client("bedrock-runtime", region_name=self.region)

    def invoke_model(self, prompt: str, params: ModelParams) -> ModelResponse:
        """
        Send a completion request to Bedrock.

        Args:
            prompt: Fully formatted Claude prompt
            params: Inference parameters (model_id must be set)

        Returns:
            Decoded model response

        Raises:
            ValueError: If params.model_id is empty
            ModelInvocationError: On transport or service errors
            ResponseParseError: If the response body is not valid JSON
        """
        if not params.model_id:
            raise ValueError("model_id is not set (export MODEL_ID or set model_id in config)")

        body = json.dumps(build_request_body(prompt, params))

        try:
            resp = self.client.invoke_model(
                modelId=params.model_id,
                body=body,
                contentType="application/json",
                accept="application/json",
            )
            raw = resp["body"].read()
        except (ClientError, BotoCoreError) as e:
            raise ModelInvocationError(f"failed to invoke model: {e}") from e

        logger.debug(f"Raw response from {params.model_id}: {raw!r}")
        return parse_response_body(raw)
