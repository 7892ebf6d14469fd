"""Placeholder content synthesis.

Two independent paths fill a template's placeholders:

- ``ContentSynthesizer.synthesize(prompt, placeholders)`` derives values from
  a free-text prompt. ``HeuristicSynthesizer`` is the built-in strategy: plain
  string heuristics, no language model. Another backend (e.g. an LLM client)
  can be dropped in by implementing the same protocol.
- ``get_sample_content(placeholders)`` looks names up in a static table of
  example values, for previews where no prompt exists.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Iterable, Protocol, runtime_checkable

from flyer_studio.config.constants import Limits
from flyer_studio.config.logging import get_logger

logger = get_logger(__name__)


class ContentRule(str, Enum):
    """How a placeholder's value is derived from the prompt."""

    HEADLINE = "headline"
    DESCRIPTION = "description"
    CTA = "cta"
    BRAND = "brand"
    EXCERPT = "excerpt"


PLACEHOLDER_RULES: Dict[str, ContentRule] = {
    "HEADLINE": ContentRule.HEADLINE,
    "AD_HEADLINE": ContentRule.HEADLINE,
    "EVENT_NAME": ContentRule.HEADLINE,
    "POST_HEADLINE": ContentRule.HEADLINE,
    "TITLE": ContentRule.HEADLINE,
    "CONTENT": ContentRule.DESCRIPTION,
    "AD_DESCRIPTION": ContentRule.DESCRIPTION,
    "EVENT_DESCRIPTION": ContentRule.DESCRIPTION,
    "POST_CONTENT": ContentRule.DESCRIPTION,
    "DESCRIPTION": ContentRule.DESCRIPTION,
    "CTA_TEXT": ContentRule.CTA,
    "CTA": ContentRule.CTA,
    "BRAND_NAME": ContentRule.BRAND,
    "COMPANY_NAME": ContentRule.BRAND,
}

DEFAULT_CTA = "Get Started Now"
DEFAULT_BRAND = "Your Brand"
BRAND_STOP_WORDS = frozenset({"with", "from", "this", "that", "will", "have"})
ELLIPSIS = "..."

_WORD_START = re.compile(r"\b\w", re.ASCII)


@runtime_checkable
class ContentSynthesizer(Protocol):
    """Strategy that maps a prompt onto a template's placeholders."""

    def synthesize(self, prompt: str, placeholders: Iterable[str]) -> Dict[str, str]:
        """Return a value for every name in ``placeholders``."""
        ...


def title_case_words(text: str) -> str:
    """Upper-case the first character of every word, leaving the rest as is."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters and append an ellipsis."""
    return text[:limit] + ELLIPSIS


def extract_brand_word(prompt: str) -> str | None:
    """First prompt word longer than three letters that isn't a stop word."""
    for word in prompt.lower().split():
        if len(word) >= Limits.BRAND_WORD_MIN_LEN and word not in BRAND_STOP_WORDS:
            return word[:1].upper() + word[1:]
    return None


class HeuristicSynthesizer:
    """Derive placeholder values from the prompt with fixed string rules.

    Unknown names fall back to a short prompt excerpt. The prompt is used as
    given, surrounding whitespace included.
    """

    def __init__(self, rules: Dict[str, ContentRule] | None = None, cta_text: str = DEFAULT_CTA):
        self.rules = dict(PLACEHOLDER_RULES if rules is None else rules)
        self.cta_text = cta_text

    def rule_for(self, name: str) -> ContentRule:
        return self.rules.get(name, ContentRule.EXCERPT)

    def synthesize(self, prompt: str, placeholders: Iterable[str]) -> Dict[str, str]:
        values = {name: self.value_for(self.rule_for(name), prompt) for name in placeholders}
        logger.debug("Synthesized %d placeholder values from prompt", len(values))
        return values

    def value_for(self, rule: ContentRule, prompt: str) -> str:
        if rule is ContentRule.CTA:
            return self.cta_text
        if rule is ContentRule.BRAND:
            return extract_brand_word(prompt) or DEFAULT_BRAND
        if rule is ContentRule.HEADLINE:
            return title_case_words(prompt[: Limits.HEADLINE_CHARS])
        if rule is ContentRule.DESCRIPTION:
            if len(prompt) > Limits.DESCRIPTION_SHORT_MAX:
                return truncate(prompt, Limits.DESCRIPTION_CHARS)
            return prompt
        return truncate(prompt, Limits.EXCERPT_CHARS)


# Example values shown when previewing a template without a prompt
SAMPLE_CONTENT: Dict[str, str] = {
    # Headlines
    "HEADLINE": "Summer Music Festival",
    "AD_HEADLINE": "Unlock 50% Off This Weekend",
    "POST_HEADLINE": "Big News Is Coming",
    "TITLE": "Grand Opening Celebration",
    "SUBHEADLINE": "Three days of live bands under the open sky",
    "SUBTITLE": "Where great ideas meet great design",
    "TAGLINE": "Crafted for people who care",
    # Body copy
    "CONTENT": "Join us for an unforgettable experience with live performances, local food and good company.",
    "DESCRIPTION": "A modern design built to grab attention and drive action.",
    "AD_DESCRIPTION": "Premium quality at prices you'll love. Limited time only.",
    "POST_CONTENT": "We've been working on something special and can't wait to share it with you.",
    "BODY": "Everything you need, all in one place.",
    # Calls to action
    "CTA_TEXT": "Get Started Now",
    "CTA": "Learn More",
    "BUTTON_TEXT": "Shop Now",
    # Brand
    "BRAND_NAME": "Acme Studio",
    "COMPANY_NAME": "Acme Inc.",
    "LOGO_TEXT": "ACME",
    # Events
    "EVENT_NAME": "Summer Music Festival",
    "EVENT_DESCRIPTION": "Three stages, twenty bands and a weekend to remember.",
    "EVENT_DATE": "Saturday, July 15",
    "EVENT_TIME": "7:00 PM",
    "EVENT_LOCATION": "Central Park Amphitheater",
    "DATE": "July 15, 2025",
    "TIME": "7:00 PM - 11:00 PM",
    "LOCATION": "123 Main Street, Springfield",
    "VENUE": "The Grand Hall",
    # Offers
    "PRICE": "$49.99",
    "ORIGINAL_PRICE": "$99.99",
    "DISCOUNT": "50% OFF",
    "PROMO_CODE": "SUMMER50",
    "OFFER": "Buy one, get one free",
    "EXPIRY": "Offer ends Sunday",
    # Contact
    "PHONE": "(555) 123-4567",
    "EMAIL": "hello@example.com",
    "WEBSITE": "www.example.com",
    "ADDRESS": "123 Main Street, Springfield",
    "SOCIAL_HANDLE": "@acmestudio",
    "HASHTAG": "#SummerFest",
    # Misc
    "FEATURE_1": "Fast setup",
    "FEATURE_2": "Friendly support",
    "FEATURE_3": "No hidden fees",
    "TESTIMONIAL": "\"Best decision we made all year.\"",
    "AUTHOR": "Jamie Rivera",
}


def get_sample_content(placeholders: Iterable[str]) -> Dict[str, str]:
    """Example value for each placeholder, ``"Sample <name>"`` when unknown."""
    return {name: SAMPLE_CONTENT.get(name, f"Sample {name.lower()}") for name in placeholders}
