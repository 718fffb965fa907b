import logging
from jinja2 import Environment, FileSystemLoader, Template, TemplateError
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PromptBuilder:
    """Wraps raw prompts in the Claude text-completion format using a Jinja2 template."""

    def __init__(self, template_path: str):
        self.template_path = Path(template_path)
        self.template: Optional[Template] = None
        self.last_mtime: Optional[float] = None
        # Leading "\n\nHuman:" is significant, so no whitespace trimming
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_path.parent)),
            keep_trailing_newline=False,
        )

    def load(self) -> Template:
        """Load template from file."""
        if not self.template_path.exists():
            raise FileNotFoundError(f"Template file not found: {self.template_path}")

        self.template = self.env.get_template(self.template_path.name)
        self.last_mtime = self.template_path.stat().st_mtime
        return self.template

    def check_and_reload(self) -> tuple[bool, Optional[Template]]:
        """
        Check if template file has been modified and reload if necessary.

        Returns:
            Tuple of (was_reloaded: bool, template: Optional[Template])
        """
        if not self.template_path.exists():
            return False, self.template

        current_mtime = self.template_path.stat().st_mtime

        # First load or file has been modified
        if self.last_mtime is None or current_mtime > self.last_mtime:
            try:
                template = self.load()
                return True, template
            except (OSError, TemplateError) as e:
                logger.error(f"Error reloading template: {e}")
                self.last_mtime = current_mtime
                return False, self.template

        return False, self.template

    def render(self, prompt: str, **variables: Any) -> str:
        """
        Render the Claude prompt for a raw user prompt.

        Args:
            prompt: Raw prompt text
            **variables: Extra variables available to the template

        Returns:
            Prompt in "\\n\\nHuman: ...\\n\\nAssistant:" form
        """
        if self.template is None:
            self.load()

        return self.template.render(prompt=prompt, **variables)
