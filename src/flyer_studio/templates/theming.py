"""Brand kit theming for generated markup.

Rewrites a fixed set of Tailwind color utilities to the brand kit's colors
and injects the brand font. This is text rewriting only: utilities outside
``COLOR_TOKENS`` are left alone, whatever the brand kit would want.
"""

from __future__ import annotations

import re
from urllib.parse import quote_plus

from flyer_studio.config.logging import get_logger
from flyer_studio.config.settings import get_settings

from .models import BrandKit

logger = get_logger(__name__)

DEFAULT_FONT = "Default"
FONT_WEIGHTS = "wght@400;600;700"

# utility token -> (prefix, brand kit color attribute)
COLOR_TOKENS = {
    "from-blue-600": ("from", "primary_color"),
    "to-purple-600": ("to", "secondary_color"),
    "bg-blue-600": ("bg", "primary_color"),
    "text-blue-600": ("text", "primary_color"),
}

_HEAD_TAG = re.compile(r"<head\b[^>]*>", re.IGNORECASE)
_STYLE_TAG = re.compile(r"<style\b[^>]*>", re.IGNORECASE)


def _token_pattern(token: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-]){re.escape(token)}(?![\w-])")


_TOKEN_PATTERNS = {token: _token_pattern(token) for token in COLOR_TOKENS}


def font_stylesheet_url(font_family: str, base_url: str | None = None) -> str:
    base = base_url or get_settings().google_fonts_url
    return f"{base}?family={quote_plus(font_family)}:{FONT_WEIGHTS}&display=swap"


def font_link_tag(font_family: str, base_url: str | None = None) -> str:
    return f'<link href="{font_stylesheet_url(font_family, base_url)}" rel="stylesheet">'


def font_rule(font_family: str) -> str:
    family = font_family.replace("'", "")
    return f"body {{ font-family: '{family}', sans-serif; }}"


def apply_brand_colors(html_content: str, brand_kit: BrandKit) -> str:
    """Swap the known color utilities for arbitrary-value brand colors."""
    result = html_content
    for token, (prefix, attr) in COLOR_TOKENS.items():
        color = getattr(brand_kit, attr).strip()
        result = _TOKEN_PATTERNS[token].sub(f"{prefix}-[{color}]", result)
    return result


def apply_brand_font(html_content: str, font_family: str, base_url: str | None = None) -> str:
    """Inject the font stylesheet after ``<head>`` and a body rule after ``<style>``.

    Each injection happens once; markup that already carries the link or the
    rule is left unchanged. Markup without a ``<head>``/``<style>`` tag gets
    no link/rule respectively.
    """
    if not font_family or font_family == DEFAULT_FONT:
        return html_content
    result = html_content
    link = font_link_tag(font_family, base_url)
    if link not in result:
        result = _HEAD_TAG.sub(lambda m: f"{m.group(0)}\n    {link}", result, count=1)
    rule = font_rule(font_family)
    if rule not in result:
        result = _STYLE_TAG.sub(lambda m: f"{m.group(0)}\n        {rule}", result, count=1)
    return result


def apply_brand_kit(html_content: str, brand_kit: BrandKit, fonts_url: str | None = None) -> str:
    """Apply a brand kit's colors and font to populated markup.

    Re-applying the same brand kit to its own output returns it unchanged.
    """
    logger.debug("Applying brand kit %s (%s)", brand_kit.id, brand_kit.name)
    result = apply_brand_colors(html_content, brand_kit)
    return apply_brand_font(result, brand_kit.font_family, fonts_url)
