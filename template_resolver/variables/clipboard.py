"""Clipboard variable."""

from core import EditorHost
from template_resolver.registry import Category, builtin_variable


@builtin_variable(
    name="CLIPBOARD",
    category=Category.CLIPBOARD,
    description="Current clipboard text",
)
async def extract_clipboard(host: EditorHost) -> str | None:
    return await host.read_clipboard()
