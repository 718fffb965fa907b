"""UI adapters for the prompt engineering demo."""
