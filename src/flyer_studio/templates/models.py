"""Data models for templates, categories and brand kits.

- Template: a categorized unit of markup. Its placeholders and features are
  computed from ``html_content`` and cannot be set independently.
- TemplateCategory / CategoryManifest: the ``categories.json`` document.
- BrandKit: theming profile owned by an external collaborator; read-only here.
- TemplateDraft: the input to saving a new custom template.
- GeneratedContent: the result of filling a template from a prompt.

All models accept and emit camelCase aliases (``htmlContent``,
``primaryColor``) so records from the web client validate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .features import TemplateFeatures, classify_features
from .placeholders import extract_placeholders


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TemplateCategory(_CamelModel):
    """A named grouping of templates, one directory in the store.

    Frozen: the store hands out its cached instances.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Category identifier and directory name, e.g. 'event'")
    name: str = Field(description="Display name, e.g. 'Event Flyers'")
    description: str = Field(default="", description="Category description")


class CategoryManifest(_CamelModel):
    """Contents of ``templates/categories.json``."""

    categories: List[TemplateCategory] = Field(default_factory=list)


class Template(_CamelModel):
    """A named, categorized design unit.

    Immutable once built. Use ``with_content`` to derive a copy with new
    markup; placeholders and features follow the new markup automatically.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="'category/slug', unique within the store")
    name: str = Field(description="Human-readable title")
    category: str = Field(description="Owning category id")
    description: str = Field(default="", description="Template description")
    html_content: str = Field(default="", description="Raw markup with {{NAME}} tokens")
    preview_url: str | None = Field(default=None, description="Optional preview image")
    thumbnail_url: str | None = Field(default=None, description="Optional thumbnail image")
    placeholders: List[str] = Field(default_factory=list, description="Unique placeholder names, first-seen order")
    features: TemplateFeatures = Field(default_factory=TemplateFeatures)

    @model_validator(mode="before")
    @classmethod
    def _derive_from_content(cls, data: Any) -> Any:
        """Compute placeholders and features once, replacing any passed in."""
        if not isinstance(data, dict):
            return data
        html = data.get("html_content", data.get("htmlContent", ""))
        if not isinstance(html, str):
            return data
        return {**data, "placeholders": extract_placeholders(html), "features": classify_features(html)}

    def with_content(self, html_content: str) -> "Template":
        return type(self).model_validate({**self.model_dump(), "html_content": html_content})


class TemplateDraft(_CamelModel):
    """A template without an id, as passed to ``save_template``.

    Extra keys such as ``placeholders`` or ``features`` are ignored; they are
    always recomputed from the markup.
    """

    name: str = Field(min_length=1, description="Template name, e.g. 'My Banner'")
    category: str = Field(description="Category id the template belongs to")
    description: str = Field(default="", description="Template description")
    html_content: str = Field(description="Markup to store verbatim")
    preview_url: str | None = None
    thumbnail_url: str | None = None


class BrandKit(_CamelModel):
    """Theming profile applied to generated output."""

    id: str | int = Field(description="Identifier assigned by the brand kit owner")
    name: str = Field(description="Brand kit name")
    logo: str | None = Field(default=None, description="Logo URL")
    primary_color: str = Field(description="Primary color, e.g. '#1E40AF'")
    secondary_color: str = Field(description="Secondary color, e.g. '#9333EA'")
    font_family: str = Field(default="Default", description="Font family or 'Default'")
    is_active: bool = Field(default=False)


class GeneratedContent(_CamelModel):
    """Final markup plus the values that were filled in."""

    html_content: str
    placeholders: Dict[str, str] = Field(default_factory=dict)
