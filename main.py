#!/usr/bin/env python3
"""
Bedrock prompt engineering demo launcher - routes to different UI adapters.

Usage:
    python main.py [adapter]

Adapters:
    cli     - Menu-driven terminal interface (default)

Environment (.env is loaded automatically):
    MODEL_ID    Bedrock model id, e.g. anthropic.claude-v2:1
    AWS_REGION  Region of the Bedrock runtime endpoint
    LOG_LEVEL   DEBUG, INFO, WARNING or ERROR for all log components
"""

import os
import sys
import logging
from pathlib import Path

from botocore.exceptions import BotoCoreError
from dotenv import load_dotenv

from core.bedrock_client import BedrockClient
from core.config_loader import ConfigLoader
from core.llm_service import LLMService
from core.logger import init_logger, parse_level, LogManager
from core.prompt_builder import PromptBuilder

ADAPTERS = ("cli",)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    # Load environment variables
    load_dotenv()

    # Parse command line argument (default to "cli")
    adapter = argv[0] if argv else "cli"
    if adapter not in ADAPTERS:
        print(f"Error: Unknown adapter '{adapter}'")
        print(f"Available adapters: {', '.join(ADAPTERS)}")
        sys.exit(1)

    base_dir = Path(__file__).parent
    init_logger(log_level=logging.INFO, log_file=str(base_dir / "logs" / "cli.log"))
    log_manager = LogManager()

    level_name = os.getenv("LOG_LEVEL")
    if level_name:
        try:
            log_manager.set_level("all", parse_level(level_name))
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

    logger = logging.getLogger("app.prompt")

    # Initialize core components
    config_loader = ConfigLoader(base_dir / "config" / "config.yaml")
    prompt_builder = PromptBuilder(base_dir / "templates" / "claude_prompt.jinja")
    try:
        config_loader.load()
        prompt_builder.load()
    except Exception as e:
        logger.error(f"Error loading initial configuration: {e}")
        print(f"Error loading initial configuration: {e}")
        sys.exit(1)

    try:
        client = BedrockClient()
    except BotoCoreError as e:
        logger.error(f"Error creating Bedrock client: {e}")
        print(f"Error creating Bedrock client: {e}")
        sys.exit(1)

    llm_service = LLMService(
        config_loader=config_loader,
        prompt_builder=prompt_builder,
        client=client,
        logger=logger,
    )

    if not llm_service.resolve_model_id():
        print("Error: MODEL_ID environment variable not set")
        print("Please add it to your .env file or set model_id in config/config.yaml")
        sys.exit(1)

    # Route to appropriate adapter
    if adapter == "cli":
        from adapters.cli_ptk import run_menu
        run_menu(llm_service, log_manager)


if __name__ == "__main__":
    main()
