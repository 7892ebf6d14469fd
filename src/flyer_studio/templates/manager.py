"""Template Manager: the entry point callers (HTTP handlers, CLI) use."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Mapping

from flyer_studio.config.logging import get_logger
from flyer_studio.config.settings import get_settings

from .cache import InMemoryTemplateCache
from .models import BrandKit, GeneratedContent, Template, TemplateCategory, TemplateDraft
from .placeholders import replace_placeholders
from .store import TemplateStore
from .synthesis import ContentSynthesizer, HeuristicSynthesizer, get_sample_content
from .theming import apply_brand_kit

logger = get_logger(__name__)


class TemplateManager:
    """Stateless façade over a TemplateStore and a ContentSynthesizer.

    Lookups that find nothing return None (or an empty list); only saving
    raises.
    """

    def __init__(
        self,
        store: TemplateStore | None = None,
        synthesizer: ContentSynthesizer | None = None,
        fonts_url: str | None = None,
    ):
        if store is None:
            settings = get_settings()
            store = TemplateStore(
                settings.templates_dir,
                InMemoryTemplateCache(ttl_seconds=settings.cache_ttl_seconds),
            )
        self.store = store
        self.synthesizer: ContentSynthesizer = synthesizer or HeuristicSynthesizer()
        self.fonts_url = fonts_url

    def get_categories(self) -> List[TemplateCategory]:
        return self.store.get_categories()

    def list_templates(self, category: str | None = None) -> List[Template]:
        return self.store.list_templates(category)

    def load_template(self, template_id: str) -> Template | None:
        return self.store.load_template(template_id)

    def save_template(self, template: TemplateDraft | Mapping[str, Any], custom_id: str | None = None) -> str:
        """Save a custom template. Accepts a draft or its dict form."""
        draft = template if isinstance(template, TemplateDraft) else TemplateDraft.model_validate(template)
        return self.store.save_template(draft, custom_id)

    def _render(
        self,
        template: Template,
        values: dict[str, str],
        brand_kit: BrandKit | Mapping[str, Any] | None,
    ) -> GeneratedContent:
        html_content = replace_placeholders(template.html_content, values)
        if brand_kit is not None:
            kit = brand_kit if isinstance(brand_kit, BrandKit) else BrandKit.model_validate(brand_kit)
            html_content = apply_brand_kit(html_content, kit, self.fonts_url)
        return GeneratedContent(html_content=html_content, placeholders=values)

    def generate_template_content(
        self,
        template_id: str,
        prompt: str,
        brand_kit: BrandKit | Mapping[str, Any] | None = None,
    ) -> GeneratedContent | None:
        """Fill a template's placeholders from ``prompt`` and apply ``brand_kit``.

        Args:
            template_id: Template to fill, ``category/slug``.
            prompt: Free-text description of the flyer/ad.
            brand_kit: Optional theming profile.

        Returns:
            Final markup with the values used, or None if the template doesn't exist.
        """
        template = self.load_template(template_id)
        if template is None:
            logger.warning("Cannot generate content: template %s not found", template_id)
            return None
        values = self.synthesizer.synthesize(prompt, template.placeholders)
        logger.info("Generated content for %s (%d placeholders)", template_id, len(values))
        return self._render(template, values, brand_kit)

    def render_preview(
        self,
        template_id: str,
        brand_kit: BrandKit | Mapping[str, Any] | None = None,
    ) -> GeneratedContent | None:
        """Fill a template with sample content for display in a gallery."""
        template = self.load_template(template_id)
        if template is None:
            return None
        return self._render(template, get_sample_content(template.placeholders), brand_kit)


@lru_cache
def get_template_manager() -> TemplateManager:
    """Process-wide manager built from settings."""
    return TemplateManager()
