"""
Shared fixtures for all tests.

The Bedrock runtime client is a MagicMock; the console writes into a StringIO;
the prompt_toolkit session is replaced by a scripted fake.
"""
import io
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from core.bedrock_client import BedrockClient
from core.config_loader import ConfigLoader
from core.llm_service import LLMService
from core.prompt_builder import PromptBuilder

REPO_ROOT = Path(__file__).resolve().parents[1]
TEMPLATE_PATH = REPO_ROOT / "templates" / "claude_prompt.jinja"

CONFIG_YAML = """\
model_id: anthropic.claude-v2:1
temperature: 0.7
top_p: 1.0
top_k: 500
max_tokens: 500
"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def bedrock_body(completion="Hello there.", stop_reason="stop_sequence", **extra):
    """Response dict shaped like boto3's InvokeModel output."""
    payload = {"type": "completion", "completion": completion, "stop_reason": stop_reason, **extra}
    return {"body": io.BytesIO(json.dumps(payload).encode("utf-8")), "contentType": "application/json"}


def sent_body(runtime, call_index=-1):
    """Decode the JSON body passed to the mocked invoke_model."""
    kwargs = runtime.invoke_model.call_args_list[call_index].kwargs
    return json.loads(kwargs["body"])


class ScriptedSession:
    """Stands in for PromptSession: returns queued answers, then raises EOFError."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.messages = []

    def prompt(self, message=""):
        self.messages.append(message)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see the developer's Bedrock settings."""
    for name in ("MODEL_ID", "AWS_REGION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


@pytest.fixture
def config_loader(config_path):
    loader = ConfigLoader(config_path)
    loader.load()
    return loader


@pytest.fixture
def prompt_builder():
    builder = PromptBuilder(TEMPLATE_PATH)
    builder.load()
    return builder


@pytest.fixture
def runtime():
    """Mocked boto3 bedrock-runtime client returning a fresh body per call."""
    mock = MagicMock()
    mock.invoke_model.side_effect = lambda **kwargs: bedrock_body()
    return mock


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)


@pytest.fixture
def llm_service(config_loader, prompt_builder, runtime, console):
    return LLMService(
        config_loader=config_loader,
        prompt_builder=prompt_builder,
        client=BedrockClient(region="us-east-1", client=runtime),
        console=console,
    )
