"""Placeholder parsing and substitution.

Placeholders have the exact form {NAME} where NAME is one or more
uppercase ASCII letters or underscores. Anything else (lowercase, digits,
unmatched braces) is left as literal text.
"""

import re

VARIABLE_PATTERN = re.compile(r"\{([A-Z_]+)\}")


def parse_variables(template: str) -> list[str]:
    """Get the unique variable names referenced by a template.

    Names are returned in order of first appearance.

    Args:
        template: Template text

    Returns:
        List of variable names, e.g. ["B", "A", "C"] for "{B} {A} {B} {C}"
    """
    names: list[str] = []
    seen: set[str] = set()
    for match in VARIABLE_PATTERN.finditer(template):
        name = match.group(1)
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def substitute(template: str, values: dict[str, str]) -> str:
    """Replace every {NAME} that has a value, in a single pass.

    Values are inserted as literal text. They are never rescanned for
    placeholders and never treated as replacement syntax ($&, \\1, ...).
    Placeholders without a value are left untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return VARIABLE_PATTERN.sub(_replace, template)
