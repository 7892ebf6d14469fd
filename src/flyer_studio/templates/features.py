"""Visual feature classification from markup marker substrings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from flyer_studio.config.constants import FEATURE_MARKERS

FEATURE_LABELS = {
    "glass_morphism": "Glass Morphism",
    "neon_effects": "Neon Effects",
    "animations": "Animations",
    "gradient": "Gradients",
}


class TemplateFeatures(BaseModel):
    """Which visual capabilities a template's markup declares."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    glass_morphism: bool = False
    neon_effects: bool = False
    animations: bool = False
    gradient: bool = False


def classify_features(html_content: str) -> TemplateFeatures:
    """Flag each feature whose marker substrings appear in ``html_content``.

    A flag is set iff at least one of its markers is present, so the result
    does not depend on where or how often a marker occurs.
    """
    return TemplateFeatures(
        **{flag: any(m in html_content for m in markers) for flag, markers in FEATURE_MARKERS.items()}
    )


def feature_labels(features: TemplateFeatures) -> list[str]:
    """Display labels for the enabled features, in a fixed order."""
    return [label for flag, label in FEATURE_LABELS.items() if getattr(features, flag)]
