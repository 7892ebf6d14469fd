"""Placeholder extraction and substitution for ``{{NAME}}`` tokens."""

from __future__ import annotations

import re
from typing import Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")


def extract_placeholders(html_content: str) -> list[str]:
    """Return the unique placeholder names in ``html_content``.

    Names keep their first-seen order and original case. Anything between
    ``{{`` and ``}}`` that contains no ``}`` counts as a name; nothing is
    validated beyond that.

    Examples:
        "<h1>{{A}}</h1>{{B}}{{A}}" -> ["A", "B"]
        "no tokens" -> []
    """
    return list(dict.fromkeys(m.group(1) for m in PLACEHOLDER_PATTERN.finditer(html_content)))


def placeholder_token(name: str) -> str:
    return "{{" + name + "}}"


def replace_placeholders(html_content: str, values: Mapping[str, str | None]) -> str:
    """Substitute every ``{{KEY}}`` occurrence for each key in ``values``.

    Keys are matched literally. A ``None`` value substitutes an empty string.
    Tokens without an entry in ``values`` are left in place.
    """
    result = html_content
    for key, value in values.items():
        result = result.replace(placeholder_token(key), value or "")
    return result
