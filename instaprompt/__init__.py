"""InstaPrompt - saved prompts with editor-aware {VARIABLE} substitution."""

__version__ = "0.1.0"
