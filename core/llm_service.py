"""
Core LLM service for sending prompts to Bedrock.

This module contains the business logic for:
- Layering model parameters (defaults, config, technique, overrides)
- Rendering prompts into the Claude text-completion format
- Calling the Bedrock runtime
- Config and template hot reload
"""

import os
import json
import logging
from dataclasses import replace
from typing import Any, Optional

# Rich imports for enhanced logging
from rich.console import Console
from rich.tree import Tree

from core.bedrock_client import (
    BedrockClient,
    ModelParams,
    ModelResponse,
    build_request_body,
    default_claude_params,
)
from core.techniques import get_technique

# Config keys that map onto ModelParams fields
PARAM_KEYS = ("temperature", "top_p", "top_k", "max_tokens")


class LLMService:
    """
    Core service for Bedrock interactions.

    This class handles all business logic including:
    - Parameter construction
    - Template rendering
    - API calls
    """

    def __init__(
        self,
        config_loader,
        prompt_builder,
        client: BedrockClient,
        logger: Optional[logging.Logger] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize LLM service.

        Args:
            config_loader: ConfigLoader instance
            prompt_builder: PromptBuilder instance
            client: BedrockClient instance
            logger: Optional logger instance
            console: Optional Rich console for debug trees
        """
        self.config_loader = config_loader
        self.prompt_builder = prompt_builder
        self.client = client
        # Use app.prompt logger category for prompt/config logging
        self.logger = logger or logging.getLogger("app.prompt")
        self.console = console or Console()

    def check_hot_reload(self) -> tuple[bool, bool]:
        """
        Check and reload config/template if modified.

        Returns:
            Tuple of (config_reloaded, template_reloaded)
        """
        config_reloaded, _ = self.config_loader.check_and_reload()
        template_reloaded, _ = self.prompt_builder.check_and_reload()

        if config_reloaded:
            config = self.config_loader.get_config()
            config_str = json.dumps(config, indent=2)
            self.logger.info(f"Config reloaded:\n{config_str}")

        return config_reloaded, template_reloaded

    def resolve_model_id(self) -> str:
        """MODEL_ID from the environment, falling back to model_id in config."""
        config = self.config_loader.get_config()
        return os.getenv("MODEL_ID") or config.get("model_id") or ""

    def build_params(self, technique: Optional[str] = None, **overrides: Any) -> ModelParams:
        """
        Build inference parameters.

        Layers, lowest to highest precedence: Claude defaults, config file,
        technique overrides, explicit keyword overrides. Overrides set to None
        are ignored.

        Args:
            technique: Optional technique key (e.g. "few_shot")
            **overrides: ModelParams fields to force

        Returns:
            ModelParams ready for invocation
        """
        config = self.config_loader.get_config()
        params = default_claude_params()

        from_config = {key: config[key] for key in PARAM_KEYS if key in config}
        params = replace(params, model_id=self.resolve_model_id(), **from_config)

        from_technique = {}
        if technique is not None:
            from_technique = get_technique(technique).param_overrides()
            params = replace(params, **from_technique)

        explicit = {key: value for key, value in overrides.items() if value is not None}
        if explicit:
            params = replace(params, **explicit)

        if self.logger.isEnabledFor(logging.DEBUG):
            tree = Tree("⚙️ [bold blue]PARAMETERS[/bold blue]")
            tree.add(f"[dim]Config:[/dim] {from_config}")
            tree.add(f"[yellow]Technique ({technique or 'none'}):[/yellow] {from_technique}")
            tree.add(f"[green]Overrides:[/green] {explicit}")
            tree.add(f"📊 [bold]Final:[/bold] {params.to_dict()}")
            self.console.print(tree)

        return params

    def send_prompt(self, prompt: str, params: ModelParams) -> ModelResponse:
        """
        Send a prompt and get the completion.

        Args:
            prompt: Raw prompt text
            params: Inference parameters

        Returns:
            Model's response
        """
        rendered = self.prompt_builder.render(prompt=prompt)

        api_call = {
            "model_id": params.model_id,
            "body": build_request_body(rendered, params),
        }
        self.logger.info(f"API call:\n{json.dumps(api_call, indent=2)}")

        response = self.client.invoke_model(rendered, params)

        self.logger.info(
            f"Completion received: stop_reason={response.stop_reason!r}, "
            f"{len(response.completion)} chars"
        )
        return response
