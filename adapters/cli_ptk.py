#!/usr/bin/env python3
"""
Menu-driven CLI for the prompt engineering demo.

This module provides a terminal interface using prompt_toolkit for input
and Rich for output.
"""

import sys
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

# Rich imports for CLI formatting
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markdown import Markdown
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text
from rich import box

from core.techniques import TECHNIQUES, get_technique

# Menu choice -> technique key
TECHNIQUE_CHOICES = {
    "1": "zero_shot",
    "2": "few_shot",
    "3": "chain_of_thought",
}
CHOICE_ALL = "4"
CHOICE_INTERACTIVE = "5"
CHOICE_EXIT = "6"


class MenuCLI:
    """Main menu CLI application."""

    def __init__(self, llm_service, log_manager, console=None, prompt_session=None):
        """
        Initialize menu CLI.

        Args:
            llm_service: LLMService instance
            log_manager: LogManager instance (from core)
            console: Optional Rich console (defaults to stdout)
            prompt_session: Optional prompt_toolkit session (anything with .prompt())
        """
        self.console = console or Console()
        self.llm_service = llm_service
        self.log_manager = log_manager
        self.logger = logging.getLogger("app.prompt")
        self.prompt_session = prompt_session or PromptSession(history=InMemoryHistory())

    def display_welcome(self) -> None:
        lines = ["[bold blue]🚀 Welcome to AWS Bedrock Prompt Engineering Demo![/bold blue]\n",
                 "This application demonstrates three key prompting techniques:"]
        for technique in TECHNIQUES.values():
            lines.append(f"• [bold]{technique.title} Prompting:[/bold] {technique.description}")

        self.console.print(Panel("\n".join(lines), title="Welcome", border_style="blue", padding=(1, 2)))

    def display_config(self) -> None:
        """Show the effective model parameters and log levels."""
        params = self.llm_service.build_params()

        config_table = Table(title="🔧 Configuration", box=box.ROUNDED)
        config_table.add_column("Setting", style="bold cyan", width=20)
        config_table.add_column("Value", style="white")

        for key, value in params.to_dict().items():
            config_table.add_row(key, str(value) if value != "" else "[red](not set)[/red]")

        status = self.log_manager.get_status()
        for component, level in status["components"].items():
            config_table.add_row(f"log.{component}", level)

        self.console.print(config_table)

    def display_menu(self) -> str:
        """Print the main menu and read a choice."""
        menu = Table(title="📋 Main Menu", box=box.ROUNDED, show_header=False)
        menu.add_column("Choice", style="bold cyan", width=4)
        menu.add_column("Action")

        for choice, key in TECHNIQUE_CHOICES.items():
            technique = get_technique(key)
            menu.add_row(choice, f"{technique.icon} {technique.title} Prompting Examples")
        menu.add_row(CHOICE_ALL, "🌟 Run All Examples")
        menu.add_row(CHOICE_INTERACTIVE, "💬 Interactive Mode")
        menu.add_row(CHOICE_EXIT, "🚪 Exit")

        self.console.print()
        self.console.print(menu)
        return self.prompt_session.prompt("Enter your choice (1-6): ").strip()

    def handle_choice(self, choice: str) -> bool:
        """
        Dispatch a menu choice.

        Returns:
            False when the user chose to exit, True otherwise
        """
        if choice in TECHNIQUE_CHOICES:
            self.run_technique(TECHNIQUE_CHOICES[choice])
        elif choice == CHOICE_ALL:
            self.run_all()
        elif choice == CHOICE_INTERACTIVE:
            self.run_interactive()
        elif choice == CHOICE_EXIT:
            return False
        else:
            self.console.print(Panel(f"❌ Invalid choice: {escape(choice)}. Please try again.",
                                     border_style="red"))
        return True

    def run_example(self, technique, example) -> bool:
        """
        Send one canned example and print the completion.

        Returns:
            True on success, False if the call failed
        """
        self.console.print(f"{technique.icon} [bold]{technique.title} Prompting:[/bold] {example.title}")
        self.console.print(Panel(Text(example.prompt), title="Prompt", border_style="cyan"))

        try:
            params = self.llm_service.build_params(technique.key, temperature=example.temperature)
            with self.console.status("[bold green]🤔 Thinking...", spinner="dots"):
                response = self.llm_service.send_prompt(example.prompt, params)

        except Exception as e:
            self.logger.error(f"Error in {example.title}: {e}")
            self.console.print(Panel(f"❌ Error in {example.title}: {escape(str(e))}",
                                     title="Error", border_style="red"))
            return False

        self.console.print(Panel(Markdown(response.completion.strip()), title="Response",
                                 border_style="green", padding=(1, 2)))
        return True

    def run_technique(self, key: str) -> int:
        """
        Run every example of a technique, continuing past failures.

        Returns:
            Number of examples that failed
        """
        technique = get_technique(key)

        self.console.print(Rule(f"{technique.icon} {technique.title.upper()} PROMPTING EXAMPLES"))
        failures = sum(1 for example in technique.examples if not self.run_example(technique, example))
        self.console.print(Rule())

        if failures:
            self.logger.warning(f"{technique.title}: {failures}/{len(technique.examples)} examples failed")
        return failures

    def run_all(self) -> int:
        """Run every technique in menu order; returns total failures."""
        self.console.print("\n🌟 Running all prompting technique examples...")

        failures = 0
        keys = list(TECHNIQUE_CHOICES.values())
        for i, key in enumerate(keys):
            failures += self.run_technique(key)
            if i < len(keys) - 1:
                self.console.print("\n⏳ Pausing between techniques...")

        self.console.print("\n✅ All examples completed!")
        return failures

    def run_interactive(self) -> None:
        """Read free-form prompts and send them with the default parameters."""
        self.console.print(Panel("💬 Interactive Mode - Enter your own prompts!\n"
                                 "[dim]Type 'exit' to return to main menu[/dim]",
                                 border_style="blue"))

        while True:
            prompt = self.prompt_session.prompt("🤖 Enter your prompt: ").strip()

            if prompt.lower() == "exit":
                break

            if not prompt:
                self.console.print("❌ Please enter a valid prompt.")
                continue

            try:
                params = self.llm_service.build_params()
                with self.console.status("[bold green]🔄 Processing your request...", spinner="dots"):
                    response = self.llm_service.send_prompt(prompt, params)

            except Exception as e:
                self.logger.error(f"Error calling API: {e}")
                self.console.print(Panel(f"❌ Error: {escape(str(e))}", title="Error", border_style="red"))
                continue

            self.console.print(Panel(Markdown(response.completion.strip()), title="🎯 Response",
                                     border_style="green", padding=(1, 2)))

    def wait_for_enter(self) -> None:
        self.prompt_session.prompt("\nPress Enter to continue...")

    def farewell(self) -> None:
        self.console.print(Panel("👋 Thank you for using AWS Bedrock Prompt Engineering Demo!",
                                 title="Farewell", border_style="blue"))

    def run(self) -> None:
        """Run the menu loop."""
        self.display_welcome()
        self.display_config()

        while True:
            try:
                # Check for hot reload before each menu
                config_reloaded, template_reloaded = self.llm_service.check_hot_reload()

                if config_reloaded or template_reloaded:
                    reloaded_items = []
                    if config_reloaded:
                        reloaded_items.append("config")
                    if template_reloaded:
                        reloaded_items.append("template")
                    self.console.print(Panel(f"🔄 Reloaded: {', '.join(reloaded_items)}", border_style="green"))

                choice = self.display_menu()
                if not self.handle_choice(choice):
                    self.farewell()
                    return

                self.wait_for_enter()

            except (KeyboardInterrupt, EOFError):
                self.farewell()
                sys.exit(0)


def run_menu(llm_service, log_manager):
    """
    Run the menu CLI.

    Args:
        llm_service: LLMService instance
        log_manager: LogManager instance (from core)
    """
    cli = MenuCLI(llm_service, log_manager)
    cli.run()
